# tests/test_formatter.py
import json

from clipcat.config import OutputFormat
from clipcat.core.formatter import fence_for, language_hint, render
from clipcat.core.report import format_size, render_listing, render_stats
from clipcat.models import ExtensionStats, FileRecord, RunResult


def make_result(*records, truncated=False, binaries=0):
    by_ext = {}
    for r in records:
        stats = by_ext.setdefault(r.extension or "(none)", ExtensionStats())
        stats.file_count += 1
        stats.total_bytes += r.size_bytes
    return RunResult(
        records=tuple(records),
        skipped_binary_count=binaries,
        total_bytes_copied=sum(r.size_bytes for r in records),
        truncated=truncated,
        by_extension=by_ext,
    )


def record(path, content, ext):
    return FileRecord(path=path, extension=ext, size_bytes=len(content.encode("utf-8")), content=content)


SAMPLE = make_result(
    record("src/main.py", "print('hi')\n", "py"),
    record("README.md", "# Title", "md"),
    binaries=2,
)


# --- Test 1: default ---

def test_default_format():
    out = render(SAMPLE, OutputFormat.DEFAULT)
    assert out == "--- src/main.py ---\nprint('hi')\n\n\n--- README.md ---\n# Title\n\n"


# --- Test 2: markdown ---

def test_markdown_format():
    out = render(SAMPLE, OutputFormat.MARKDOWN)
    assert "## src/main.py\n\n```python\nprint('hi')\n```\n" in out
    assert "## README.md\n\n```markdown\n# Title\n```\n" in out
    assert out.index("src/main.py") < out.index("README.md")


def test_markdown_fence_outgrows_content_backticks():
    content = "Example:\n```js\nx()\n```\n"
    out = render(make_result(record("doc.md", content, "md")), OutputFormat.MARKDOWN)
    assert out.startswith("## doc.md\n\n````markdown\n")
    assert out.endswith("````\n")


def test_fence_and_hint_helpers():
    assert fence_for("no ticks") == "```"
    assert fence_for("`````") == "``````"
    assert language_hint("rs") == "rust"
    assert language_hint("zig") == "zig"
    assert language_hint(None) == ""


# --- Test 3: json ---

def test_json_round_trip():
    doc = json.loads(render(SAMPLE, OutputFormat.JSON))
    assert [f["path"] for f in doc["files"]] == ["src/main.py", "README.md"]
    assert doc["files"][0] == {
        "path": "src/main.py",
        "extension": "py",
        "size_bytes": 12,
        "content": "print('hi')\n",
    }
    assert doc["stats"] == {
        "file_count": 2,
        "total_bytes": 19,
        "truncated": False,
        "skipped_binary_count": 2,
    }


def test_json_escapes_content():
    tricky = 'quote " backslash \\ tab \t unicode ü\n'
    doc = json.loads(render(make_result(record("t.txt", tricky, "txt")), OutputFormat.JSON))
    assert doc["files"][0]["content"] == tricky


def test_empty_result_renders():
    assert render(make_result(), OutputFormat.DEFAULT) == ""
    assert json.loads(render(make_result(), OutputFormat.JSON))["files"] == []


# --- Test 4: listing & stats ---

def test_listing_shows_paths_and_sizes():
    listing = render_listing(make_result(record("a.rs", "0123456789", "rs"), truncated=True))
    assert "10  a.rs" in listing
    assert "1 file(s), 10 bytes" in listing
    assert "Size limit reached" in listing


def test_stats_block():
    stats = render_stats(SAMPLE)
    assert "Total files:    2" in stats
    assert "Skipped binary: 2" in stats
    assert "Truncated:      no" in stats
    assert "py " in stats and "md " in stats
    assert "1     | 12         | src/main.py" in stats


def test_format_size():
    assert format_size(10) == "10 B"
    assert format_size(2048) == "2.0 KB"
    assert format_size(3 * 1024 * 1024) == "3.00 MB"
