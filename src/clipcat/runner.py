# src/clipcat/runner.py
import sys
from typing import AbstractSet, Callable, Optional, TextIO

from clipcat.clipboard import copy_to_clipboard
from clipcat.config import DEFAULT_IGNORED_DIRS, RunConfig
from clipcat.core.accumulator import Accumulator
from clipcat.core.classifier import classify
from clipcat.core.formatter import render
from clipcat.core.ignore import IgnoreResolver
from clipcat.core.report import render_listing, render_stats
from clipcat.core.walker import DirectoryWalker
from clipcat.models import RunResult
from clipcat.utils.console import Console


def collect(
    config: RunConfig,
    console: Console,
    ignored_dirs: AbstractSet[str] = DEFAULT_IGNORED_DIRS,
) -> RunResult:
    """Walks, classifies and accumulates in a single pass."""
    config.check_roots()

    resolver = IgnoreResolver(config, ignored_dirs)
    walker = DirectoryWalker(config, resolver, console)
    accumulator = Accumulator(config.max_total_bytes)

    for entry in walker.walk():
        record = classify(entry, console, max_bytes=accumulator.remaining_bytes)
        if record is None:
            accumulator.mark_unreadable()
            continue
        if record.is_binary:
            console.info(f"Skipping binary file {record.path}")
        if not accumulator.add(record):
            console.info(f"Size limit reached at {record.path} ({record.size_bytes} bytes), stopping.")
            break

    result = accumulator.result()
    console.info(f"{result.file_count} file(s) admitted, {result.total_bytes_copied} bytes.")
    return result


def execute(
    config: RunConfig,
    console: Console,
    copy: Optional[Callable[[str], None]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """
    Runs one invocation end to end and returns the exit code. ConfigError
    and ClipboardError propagate to the caller.
    """
    out = out if out is not None else sys.stdout
    result = collect(config, console)

    if config.dry_run:
        out.write(render_listing(result))
        if config.show_stats:
            console.say(render_stats(result))
        return 0

    if config.show_stats:
        console.say(render_stats(result))

    if not result.records:
        if result.truncated:
            console.say(f"Size limit of {config.max_total_bytes} bytes reached before any file fit; nothing was copied.")
        else:
            console.say("No files found matching the criteria.")
        return 0

    text = render(result, config.format)
    if config.to_stdout:
        out.write(text)
    else:
        (copy or copy_to_clipboard)(text)
        console.say(f"Copied content of {result.file_count} file(s) to clipboard.")

    if result.truncated:
        console.say(f"Size limit of {config.max_total_bytes} bytes reached; remaining files were left out.")
    return 0
