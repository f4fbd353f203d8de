# src/clipcat/core/accumulator.py
from typing import Dict, List

from clipcat.models import ExtensionStats, FileRecord, RunResult

NO_EXTENSION = "(none)"


class Accumulator:
    """
    Collects records in walk order under a total byte budget.

    The first text file that does not fit closes the accumulator: nothing
    after it is admitted, even files small enough to fit.
    """

    def __init__(self, max_total_bytes: int):
        if max_total_bytes <= 0:
            raise ValueError("max_total_bytes must be positive")
        self.max_total_bytes = max_total_bytes
        self.records: List[FileRecord] = []
        self.total_bytes = 0
        self.skipped_binary_count = 0
        self.skipped_unreadable_count = 0
        self.truncated = False
        self._by_extension: Dict[str, ExtensionStats] = {}

    @property
    def remaining_bytes(self) -> int:
        return self.max_total_bytes - self.total_bytes

    def add(self, record: FileRecord) -> bool:
        """Returns False once the budget is exhausted."""
        if self.truncated:
            return False
        if record.is_binary:
            self.skipped_binary_count += 1
            return True
        if self.total_bytes + record.size_bytes > self.max_total_bytes:
            self.truncated = True
            return False

        self.records.append(record)
        self.total_bytes += record.size_bytes
        stats = self._by_extension.setdefault(record.extension or NO_EXTENSION, ExtensionStats())
        stats.file_count += 1
        stats.total_bytes += record.size_bytes
        return True

    def mark_unreadable(self) -> None:
        self.skipped_unreadable_count += 1

    def result(self) -> RunResult:
        return RunResult(
            records=tuple(self.records),
            skipped_binary_count=self.skipped_binary_count,
            total_bytes_copied=self.total_bytes,
            truncated=self.truncated,
            skipped_unreadable_count=self.skipped_unreadable_count,
            by_extension={ext: ExtensionStats(s.file_count, s.total_bytes) for ext, s in sorted(self._by_extension.items())},
        )
