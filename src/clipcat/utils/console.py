# src/clipcat/utils/console.py
import sys
from typing import TextIO


class Console:
    """
    Status output on stderr. Info and warning lines only show up in verbose
    mode; errors and summaries are always printed.
    """

    def __init__(self, verbose: bool = False, stream: TextIO = None):
        self.verbose = verbose
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stderr

    def info(self, message: str) -> None:
        if self.verbose:
            print(f"[clipcat] {message}", file=self.stream)

    def warn(self, message: str) -> None:
        if self.verbose:
            print(f"  > [Warning] {message}", file=self.stream)

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=self.stream)

    def say(self, message: str = "") -> None:
        print(message, file=self.stream)
