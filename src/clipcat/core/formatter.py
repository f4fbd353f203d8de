# src/clipcat/core/formatter.py
import json
import re
from typing import Dict, Type

from clipcat.config import LANGUAGE_HINTS, OutputFormat
from clipcat.models import FileRecord, RunResult

_BACKTICK_RUN = re.compile(r"`{3,}")


class Formatter:
    """Turns a RunResult into the text that ends up on the clipboard."""

    def render(self, result: RunResult) -> str:
        return "".join(self.render_file(record) for record in result.records)

    def render_file(self, record: FileRecord) -> str:
        raise NotImplementedError


class DefaultFormatter(Formatter):
    def render_file(self, record: FileRecord) -> str:
        return f"--- {record.path} ---\n{record.content}\n\n"


def language_hint(extension: str) -> str:
    if not extension:
        return ""
    return LANGUAGE_HINTS.get(extension, extension)


def fence_for(content: str) -> str:
    """A backtick fence longer than any backtick run inside ``content``."""
    longest = max((len(m.group(0)) for m in _BACKTICK_RUN.finditer(content)), default=0)
    return "`" * max(3, longest + 1)


class MarkdownFormatter(Formatter):
    def render(self, result: RunResult) -> str:
        return "\n".join(self.render_file(record) for record in result.records)

    def render_file(self, record: FileRecord) -> str:
        fence = fence_for(record.content)
        body = record.content if record.content.endswith("\n") or not record.content else record.content + "\n"
        return f"## {record.path}\n\n{fence}{language_hint(record.extension)}\n{body}{fence}\n"


class JsonFormatter(Formatter):
    def render(self, result: RunResult) -> str:
        document = {
            "files": [self.file_entry(record) for record in result.records],
            "stats": {
                "file_count": result.file_count,
                "total_bytes": result.total_bytes_copied,
                "truncated": result.truncated,
                "skipped_binary_count": result.skipped_binary_count,
            },
        }
        return json.dumps(document, indent=2, ensure_ascii=False)

    @staticmethod
    def file_entry(record: FileRecord) -> Dict:
        return {
            "path": record.path,
            "extension": record.extension,
            "size_bytes": record.size_bytes,
            "content": record.content,
        }


FORMATTERS: Dict[OutputFormat, Type[Formatter]] = {
    OutputFormat.DEFAULT: DefaultFormatter,
    OutputFormat.MARKDOWN: MarkdownFormatter,
    OutputFormat.JSON: JsonFormatter,
}


def render(result: RunResult, fmt: OutputFormat = OutputFormat.DEFAULT) -> str:
    return FORMATTERS[fmt]().render(result)
