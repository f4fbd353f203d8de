# src/clipcat/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class CandidateEntry:
    """A file found by the walker, not yet read."""
    path: Path
    rel_path: str
    depth_from_root: int
    root_index: int


@dataclass(frozen=True)
class FileRecord:
    """Immutable data class holding file information."""
    path: str
    extension: Optional[str]
    size_bytes: int
    content: str
    is_binary: bool = False


@dataclass
class ExtensionStats:
    file_count: int = 0
    total_bytes: int = 0


@dataclass(frozen=True)
class RunResult:
    records: Tuple[FileRecord, ...]
    skipped_binary_count: int
    total_bytes_copied: int
    truncated: bool
    skipped_unreadable_count: int = 0
    by_extension: Dict[str, ExtensionStats] = field(default_factory=dict)

    @property
    def file_count(self) -> int:
        return len(self.records)
