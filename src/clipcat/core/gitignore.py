# src/clipcat/core/gitignore.py
"""
Version-control ignore files as a stack of layers.

Every directory can contribute a layer (its ``.gitignore`` / ``.ignore``).
A path is checked against the layers nearest first; inside one layer the
last matching pattern decides, so ``!negation`` lines work as in git.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import pathspec

from clipcat.config import IGNORE_FILE_NAMES
from clipcat.utils.console import Console


@dataclass(frozen=True)
class IgnoreLayer:
    base: Path
    spec: pathspec.PathSpec
    source: Path


def absolute(path: Path) -> Path:
    """Absolute and normalized, without resolving symlinks."""
    return Path(os.path.abspath(path))


def load_ignore_file(ignore_file: Path, base: Path, console: Optional[Console] = None) -> Optional[IgnoreLayer]:
    """Parses one ignore file into a layer anchored at ``base``."""
    try:
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        if console:
            console.warn(f"Could not read ignore file {ignore_file} ({e})")
        return None

    try:
        spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except ValueError as e:
        if console:
            console.warn(f"Could not parse ignore file {ignore_file} ({e})")
        return None
    return IgnoreLayer(base=base, spec=spec, source=ignore_file)


def load_directory_layers(directory: Path, console: Optional[Console] = None) -> List[IgnoreLayer]:
    """Layers contributed by the ignore files sitting in ``directory``."""
    layers = []
    base = absolute(directory)
    for name in IGNORE_FILE_NAMES:
        candidate = base / name
        if candidate.is_file():
            layer = load_ignore_file(candidate, base, console)
            if layer is not None:
                layers.append(layer)
    return layers


def find_repo_top(directory: Path) -> Optional[Path]:
    """Closest ancestor (or the directory itself) holding a ``.git`` entry."""
    current = absolute(directory)
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def global_ignore_path() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return Path(config_home) / "git" / "ignore"


def base_layers(start_dir: Path, console: Optional[Console] = None) -> List[IgnoreLayer]:
    """
    Layers that apply before the walk enters ``start_dir``: the global git
    ignore file, ``.git/info/exclude`` and the ignore files of every ancestor
    up to the repository top. Farthest first.
    """
    start = absolute(start_dir)
    repo_top = find_repo_top(start)
    anchor = repo_top if repo_top is not None else start
    layers = []

    global_file = global_ignore_path()
    if global_file.is_file():
        layer = load_ignore_file(global_file, anchor, console)
        if layer is not None:
            layers.append(layer)

    if repo_top is None:
        return layers

    exclude_file = repo_top / ".git" / "info" / "exclude"
    if exclude_file.is_file():
        layer = load_ignore_file(exclude_file, repo_top, console)
        if layer is not None:
            layers.append(layer)

    ancestors = [d for d in start.parents if d == repo_top or repo_top in d.parents]
    for directory in reversed(ancestors):
        layers.extend(load_directory_layers(directory, console))
    return layers


def match_layers(layers: Sequence[IgnoreLayer], path: Path, is_dir: bool) -> Optional[bool]:
    """
    True if ignored, False if re-included by a negation, None if no layer
    has an opinion. ``layers`` is ordered farthest to nearest.
    """
    target = absolute(path)
    for layer in reversed(layers):
        try:
            rel = target.relative_to(layer.base).as_posix()
        except ValueError:
            continue
        if rel == ".":
            continue
        if is_dir:
            rel += "/"

        verdict = None
        for pattern in layer.spec.patterns:
            if pattern.include is None:
                continue
            if pattern.match_file(rel) is not None:
                verdict = pattern.include
        if verdict is not None:
            return verdict
    return None


def release_directory(layers: Sequence[IgnoreLayer], directory: Path) -> List[IgnoreLayer]:
    """
    Drops the patterns that ignore ``directory`` itself, so a directory
    named as a root is walked while the rest of each layer still applies.
    """
    target = absolute(directory)
    released = []
    for layer in layers:
        try:
            rel = target.relative_to(layer.base).as_posix() + "/"
        except ValueError:
            released.append(layer)
            continue
        if rel == "./":
            released.append(layer)
            continue
        patterns = [p for p in layer.spec.patterns if p.include is not True or p.match_file(rel) is None]
        if len(patterns) == len(layer.spec.patterns):
            released.append(layer)
        else:
            released.append(IgnoreLayer(base=layer.base, spec=pathspec.PathSpec(patterns), source=layer.source))
    return released
