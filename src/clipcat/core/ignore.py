# src/clipcat/core/ignore.py
from enum import Enum
from fnmatch import fnmatchcase
from pathlib import Path
from typing import AbstractSet, List, Sequence

import pathspec

from clipcat.config import DEFAULT_IGNORED_DIRS, RunConfig
from clipcat.core.gitignore import IgnoreLayer, match_layers


class Verdict(Enum):
    KEEP = "keep"
    SKIP = "skip"


def file_extension(name: str) -> str:
    """Text after the last dot, lower-cased; '' when there is none."""
    _, dot, ext = name.rpartition(".")
    return ext.lower() if dot else ""


def is_anchored(pattern: str) -> bool:
    """'docs/a.md' and '/a.md' are anchored, 'a.md' and 'docs/' are not."""
    return "/" in pattern.rstrip("/")


class IgnoreResolver:
    """
    Decides keep/skip for one path, checking the rule sources in order:

    1. explicit excludes (--exclude extensions, --exclude-file globs)
    2. --unignore globs
    3. --include extensions
    4. version-control ignore files (nearest file wins)
    5. built-in ignored directory names
    6. dotfiles and dot-directories

    The walker supplies the ignore-file layers for the path's directory and
    whether the parent directory itself was skipped.
    """

    def __init__(self, config: RunConfig, ignored_dirs: AbstractSet[str] = DEFAULT_IGNORED_DIRS):
        self.config = config
        self.ignored_dirs = ignored_dirs
        self.unignore_spec = pathspec.PathSpec.from_lines("gitwildmatch", config.unignore_patterns)
        self.exclude_file_spec = pathspec.PathSpec.from_lines("gitwildmatch", config.exclude_files)
        self._anchored: List[List[str]] = [
            p.strip("/").split("/")
            for p in config.unignore_patterns
            if is_anchored(p) and not p.startswith("!")
        ]

    def is_unignored(self, rel_path: str, is_dir: bool = False) -> bool:
        return self.unignore_spec.match_file(rel_path + "/" if is_dir else rel_path)

    def decide(
        self,
        rel_path: str,
        path: Path,
        is_dir: bool,
        layers: Sequence[IgnoreLayer] = (),
        parent_skipped: bool = False,
    ) -> Verdict:
        name = rel_path.rsplit("/", 1)[-1]
        ext = "" if is_dir else file_extension(name)

        if not is_dir and ext in self.config.exclude_exts:
            return Verdict.SKIP
        if self.exclude_file_spec.match_file(rel_path + "/" if is_dir else rel_path):
            return Verdict.SKIP

        if self.is_unignored(rel_path, is_dir):
            return Verdict.KEEP
        if parent_skipped:
            return Verdict.SKIP

        if not is_dir and self.config.include_exts and ext not in self.config.include_exts:
            return Verdict.SKIP

        if self.config.use_gitignore and match_layers(layers, path, is_dir):
            return Verdict.SKIP

        if is_dir and name in self.ignored_dirs:
            return Verdict.SKIP

        if name.startswith("."):
            explicitly_included = not is_dir and name.lower() == f".{ext}" and ext in self.config.include_exts
            if not explicitly_included:
                return Verdict.SKIP

        return Verdict.KEEP

    def can_reach_below(self, rel_dir: str) -> bool:
        """
        True if an anchored --unignore pattern could match something inside
        ``rel_dir``, so a skipped directory still has to be walked.
        """
        parts = rel_dir.split("/")
        for segments in self._anchored:
            if self._segments_cover(segments, parts):
                return True
        return False

    @staticmethod
    def _segments_cover(segments: List[str], parts: List[str]) -> bool:
        for i, part in enumerate(parts):
            if i >= len(segments):
                # Pattern names an ancestor of this directory
                return True
            if segments[i] == "**":
                return True
            if not fnmatchcase(part, segments[i]):
                return False
        return True
