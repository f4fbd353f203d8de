# src/clipcat/core/walker.py
import os
from pathlib import Path
from typing import Iterator, Sequence, Tuple

from clipcat.config import RunConfig
from clipcat.core.gitignore import IgnoreLayer, base_layers, load_directory_layers, release_directory
from clipcat.core.ignore import IgnoreResolver, Verdict, file_extension
from clipcat.errors import ConfigError
from clipcat.models import CandidateEntry
from clipcat.utils.console import Console


class DirectoryWalker:
    """
    Depth-first walk over every root, in the order given. Entries inside a
    directory are visited sorted by name so output is reproducible.
    Symlinks are never followed.
    """

    def __init__(self, config: RunConfig, resolver: IgnoreResolver, console: Console):
        self.config = config
        self.resolver = resolver
        self.console = console

    def walk(self) -> Iterator[CandidateEntry]:
        for root_index, root in enumerate(self.config.roots):
            if not root.exists():
                raise ConfigError(f"Path '{root}' does not exist")

            if root.is_file():
                if self._accepts_root_file(root):
                    yield CandidateEntry(path=root, rel_path=root.name, depth_from_root=0, root_index=root_index)
                continue

            self.console.info(f"Scanning {root} ...")
            layers: Tuple[IgnoreLayer, ...] = ()
            if self.config.use_gitignore:
                # A directory named on the command line is walked even when a
                # parent ignore file lists it
                layers = tuple(release_directory(base_layers(root, self.console), root))
            yield from self._walk_dir(root, "", 1, layers, False, root_index)

    def _accepts_root_file(self, path: Path) -> bool:
        # A file named on the command line only goes through the extension rules
        ext = file_extension(path.name)
        if ext in self.config.exclude_exts:
            return False
        return not self.config.include_exts or ext in self.config.include_exts

    def _walk_dir(
        self,
        directory: Path,
        rel_dir: str,
        depth: int,
        layers: Sequence[IgnoreLayer],
        parent_skipped: bool,
        root_index: int,
    ) -> Iterator[CandidateEntry]:
        if self.config.use_gitignore:
            layers = tuple(layers) + tuple(load_directory_layers(directory, self.console))

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self.console.warn(f"Skipping directory {directory} ({e})")
            return

        for entry in entries:
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            path = directory / entry.name
            try:
                if entry.is_symlink():
                    continue
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError as e:
                self.console.warn(f"Skipping {rel_path} ({e})")
                continue

            if is_dir:
                if self.config.max_depth is not None and depth > self.config.max_depth:
                    continue
                verdict = self.resolver.decide(rel_path, path, True, layers, parent_skipped)
                if verdict is Verdict.KEEP:
                    yield from self._walk_dir(path, rel_path, depth + 1, layers, False, root_index)
                elif self.resolver.can_reach_below(rel_path):
                    yield from self._walk_dir(path, rel_path, depth + 1, layers, True, root_index)

            elif is_file:
                verdict = self.resolver.decide(rel_path, path, False, layers, parent_skipped)
                if verdict is Verdict.KEEP:
                    yield CandidateEntry(path=path, rel_path=rel_path, depth_from_root=depth, root_index=root_index)
