# src/clipcat/config.py
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple

from clipcat.errors import ConfigError

DEFAULT_MAX_SIZE_MB = 10

# Directory names skipped wherever they appear (VCS metadata, build output, caches)
DEFAULT_IGNORED_DIRS: FrozenSet[str] = frozenset({
    ".git",
    ".hg",
    ".svn",
    ".bzr",
    "_darcs",
    "node_modules",
    "bower_components",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".tox",
    ".venv",
    "venv",
    "target",
    "build",
    "dist",
    ".gradle",
    ".next",
    ".idea",
    ".vscode",
})

# Always excluded, even when un-ignored
DEFAULT_EXCLUDE_FILES: Tuple[str, ...] = (".env",)

IGNORE_FILE_NAMES: Tuple[str, ...] = (".gitignore", ".ignore")

BINARY_SNIFF_BYTES = 8192
BINARY_NON_TEXT_RATIO = 0.30

LANGUAGE_HINTS = {
    "py": "python",
    "pyi": "python",
    "rs": "rust",
    "go": "go",
    "js": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "jsx": "jsx",
    "ts": "typescript",
    "tsx": "tsx",
    "java": "java",
    "kt": "kotlin",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
    "rb": "ruby",
    "php": "php",
    "swift": "swift",
    "sh": "bash",
    "bash": "bash",
    "zsh": "zsh",
    "fish": "fish",
    "ps1": "powershell",
    "sql": "sql",
    "html": "html",
    "css": "css",
    "scss": "scss",
    "json": "json",
    "yml": "yaml",
    "yaml": "yaml",
    "toml": "toml",
    "ini": "ini",
    "xml": "xml",
    "md": "markdown",
    "lua": "lua",
    "dockerfile": "dockerfile",
}


class OutputFormat(Enum):
    DEFAULT = "default"
    MARKDOWN = "markdown"
    JSON = "json"


def normalize_extensions(raw: Iterable[str]) -> FrozenSet[str]:
    """'.RS', 'py ' -> {'rs', 'py'}; blanks are dropped."""
    exts = set()
    for item in raw:
        ext = item.strip().lstrip(".").lower()
        if ext:
            exts.add(ext)
    return frozenset(exts)


def megabytes_to_bytes(megabytes: float) -> int:
    return int(megabytes * 1024 * 1024)


@dataclass(frozen=True)
class RunConfig:
    """Everything one run needs, built once from the command line."""
    roots: Tuple[Path, ...] = (Path("."),)
    include_exts: FrozenSet[str] = frozenset()
    exclude_exts: FrozenSet[str] = frozenset()
    unignore_patterns: Tuple[str, ...] = ()
    exclude_files: Tuple[str, ...] = DEFAULT_EXCLUDE_FILES
    use_gitignore: bool = True
    max_depth: Optional[int] = None
    max_total_bytes: int = megabytes_to_bytes(DEFAULT_MAX_SIZE_MB)
    format: OutputFormat = OutputFormat.DEFAULT
    dry_run: bool = False
    show_stats: bool = False
    verbose: bool = False
    to_stdout: bool = False

    def __post_init__(self):
        if not self.roots:
            raise ConfigError("At least one path is required")
        if self.max_total_bytes <= 0:
            raise ConfigError(f"Size budget must be positive, got {self.max_total_bytes} bytes")
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigError(f"Depth must be non-negative, got {self.max_depth}")

    def check_roots(self) -> None:
        """Fails on the first root that does not exist."""
        for root in self.roots:
            if not root.exists():
                raise ConfigError(f"Path '{root}' does not exist")
