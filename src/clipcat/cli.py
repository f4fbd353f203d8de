# src/clipcat/cli.py
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from clipcat import __version__
from clipcat.config import (
    DEFAULT_EXCLUDE_FILES,
    DEFAULT_MAX_SIZE_MB,
    OutputFormat,
    RunConfig,
    megabytes_to_bytes,
    normalize_extensions,
)
from clipcat.errors import ClipcatError
from clipcat.runner import execute
from clipcat.utils.console import Console

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got '{value}'")


def comma_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="clipcat",
        description="Copy the text files of one or more directories to the clipboard as LLM context.",
    )
    parser.add_argument("paths", type=Path, nargs="*", default=[Path(".")], help="Files or directories to copy (default: .)")
    parser.add_argument("-i", "--include", type=comma_list, action="extend", default=[], help="Only copy these extensions, e.g. 'py,rs'")
    parser.add_argument("-e", "--exclude", type=comma_list, action="extend", default=[], help="Never copy these extensions")
    parser.add_argument("-d", "--depth", type=int, default=None, help="Maximum directory depth below each path (0 = files directly in it)")
    parser.add_argument("--unignore", type=comma_list, action="extend", default=[], help="Globs to copy even when ignored")
    parser.add_argument("--exclude-file", type=comma_list, action="extend", default=[], help="Globs of files to always skip")
    parser.add_argument("--use-gitignore", type=parse_bool, default=True, metavar="BOOL", help="Honor .gitignore files (default: true)")
    parser.add_argument("--format", choices=[f.value for f in OutputFormat], default=OutputFormat.DEFAULT.value, help="Output format")
    parser.add_argument("--max-size-mb", type=float, default=DEFAULT_MAX_SIZE_MB, help=f"Total size limit in MB (default: {DEFAULT_MAX_SIZE_MB})")
    parser.add_argument("--dry-run", action="store_true", help="List the files that would be copied and exit")
    parser.add_argument("--stats", action="store_true", help="Print statistics about the copied files")
    parser.add_argument("--stdout", action="store_true", help="Print the output instead of copying it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace) -> RunConfig:
    """Raises ConfigError for values the parser cannot reject by itself."""
    return RunConfig(
        roots=tuple(args.paths),
        include_exts=normalize_extensions(args.include),
        exclude_exts=normalize_extensions(args.exclude),
        unignore_patterns=tuple(args.unignore),
        exclude_files=DEFAULT_EXCLUDE_FILES + tuple(args.exclude_file),
        use_gitignore=args.use_gitignore,
        max_depth=args.depth,
        max_total_bytes=megabytes_to_bytes(args.max_size_mb),
        format=OutputFormat(args.format),
        dry_run=args.dry_run,
        show_stats=args.stats,
        verbose=args.verbose,
        to_stdout=args.stdout,
    )


def main(argv: Optional[List[str]] = None):
    console = Console()
    try:
        parser = create_arg_parser()
        args = parser.parse_args(argv)
        console.verbose = args.verbose

        config = build_config(args)
        code = execute(config, console)
        if code:
            sys.exit(code)

    except ClipcatError as e:
        console.error(str(e))
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
