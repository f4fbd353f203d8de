# src/clipcat/core/report.py
from typing import List

from clipcat.models import RunResult
from clipcat.utils.tokenizer import Tokenizer

TOP_FILES = 10


def format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.2f} MB"


def render_listing(result: RunResult) -> str:
    """Dry-run preview: every file that would be copied, with its size."""
    lines: List[str] = []
    for record in result.records:
        lines.append(f"{record.size_bytes:>10}  {record.path}")
    lines.append("-" * 60)
    lines.append(f"{result.file_count} file(s), {result.total_bytes_copied} bytes would be copied.")
    if result.truncated:
        lines.append("Size limit reached: remaining files were not considered.")
    return "\n".join(lines) + "\n"


def render_stats(result: RunResult) -> str:
    total_tokens = sum(Tokenizer.count(r.content) for r in result.records)
    lines: List[str] = ["--- Stats ---"]
    lines.append(f"Total files:    {result.file_count}")
    lines.append(f"Total size:     {format_size(result.total_bytes_copied)} ({result.total_bytes_copied} bytes)")
    lines.append(f"Est. tokens:    {total_tokens}")
    lines.append(f"Skipped binary: {result.skipped_binary_count}")
    if result.skipped_unreadable_count:
        lines.append(f"Unreadable:     {result.skipped_unreadable_count}")
    lines.append(f"Truncated:      {'yes' if result.truncated else 'no'}")

    if result.by_extension:
        lines.append("")
        lines.append(f"{'Extension':<12} | {'Files':<6} | {'Bytes'}")
        lines.append("-" * 40)
        for ext, stats in result.by_extension.items():
            lines.append(f"{ext:<12} | {stats.file_count:<6} | {stats.total_bytes}")

    largest = sorted(result.records, key=lambda r: r.size_bytes, reverse=True)[:TOP_FILES]
    if largest:
        lines.append("")
        lines.append(f"--- Top {len(largest)} Largest Files ---")
        lines.append(f"{'Rank':<5} | {'Bytes':<10} | {'File Path'}")
        lines.append("-" * 60)
        for i, record in enumerate(largest):
            lines.append(f"{i + 1:<5} | {record.size_bytes:<10} | {record.path}")
    return "\n".join(lines) + "\n"
