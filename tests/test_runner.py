# tests/test_runner.py
import io

from clipcat.config import OutputFormat, RunConfig
from clipcat.runner import collect, execute
from clipcat.utils.console import Console


def test_collect_respects_budget_and_order(tmp_path, make_tree):
    make_tree(tmp_path, {f"f{i:02}.txt": "x" * (i + 1) for i in range(20)})
    result = collect(RunConfig(roots=(tmp_path,), max_total_bytes=50), Console())
    assert result.total_bytes_copied <= 50
    assert result.truncated is True
    names = [r.path.rsplit("/", 1)[-1] for r in result.records]
    assert names == sorted(names)
    assert names[0] == "f00.txt"


def test_collect_with_custom_ignore_table(tmp_path, make_tree):
    make_tree(tmp_path, {"vendor/lib.py": "v", "target/out.txt": "t"})
    result = collect(RunConfig(roots=(tmp_path,)), Console(), ignored_dirs={"vendor"})
    assert [r.path.rsplit("/", 1)[-1] for r in result.records] == ["out.txt"]


def test_collect_counts_unreadable(tmp_path, make_tree):
    make_tree(tmp_path, {"good.txt": "ok", "bad.txt": "caf\xe9".encode("latin-1")})
    result = collect(RunConfig(roots=(tmp_path,)), Console())
    assert result.skipped_unreadable_count == 1
    assert result.file_count == 1


def test_execute_uses_injected_copy(tmp_path, make_tree):
    make_tree(tmp_path, {"a.txt": "hello"})
    copied = []
    code = execute(RunConfig(roots=(tmp_path,), format=OutputFormat.MARKDOWN), Console(), copy=copied.append)
    assert code == 0
    assert copied[0].endswith("```txt\nhello\n```\n")


def test_execute_dry_run_writes_listing(tmp_path, make_tree):
    make_tree(tmp_path, {"a.txt": "hello"})
    copied, out = [], io.StringIO()
    code = execute(RunConfig(roots=(tmp_path,), dry_run=True), Console(), copy=copied.append, out=out)
    assert code == 0
    assert copied == []
    assert "a.txt" in out.getvalue()


def test_verbose_reports_binary_and_limit(tmp_path, make_tree, capsys):
    make_tree(tmp_path, {"a.bin": b"\x00\x01", "b.txt": "12345", "c.txt": "123456"})
    collect(RunConfig(roots=(tmp_path,), max_total_bytes=8, verbose=True), Console(verbose=True))
    err = capsys.readouterr().err
    assert "Skipping binary file" in err
    assert "Size limit reached" in err


def test_collect_stops_on_huge_file_without_admitting_it(tmp_path, make_tree):
    make_tree(tmp_path, {"a.txt": b"x" * 5_000_000, "b.txt": "small"})
    result = collect(RunConfig(roots=(tmp_path,), max_total_bytes=100), Console())
    assert result.records == ()
    assert result.total_bytes_copied == 0
    assert result.truncated is True


def test_execute_reports_limit_when_nothing_fits(tmp_path, make_tree, capsys):
    make_tree(tmp_path, {"big.txt": "x" * 50})
    copied = []
    code = execute(RunConfig(roots=(tmp_path,), max_total_bytes=10), Console(), copy=copied.append)
    err = capsys.readouterr().err
    assert code == 0
    assert copied == []
    assert "Size limit of 10 bytes reached" in err
    assert "No files found" not in err
