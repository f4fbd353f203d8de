# src/clipcat/core/classifier.py
import os
from typing import Optional

from clipcat.config import BINARY_NON_TEXT_RATIO, BINARY_SNIFF_BYTES
from clipcat.core.ignore import file_extension
from clipcat.models import CandidateEntry, FileRecord
from clipcat.utils.console import Console

_TEXT_BYTES = bytes({7, 8, 9, 10, 12, 13, 27} | set(range(0x20, 0x100)) - {0x7F})


def is_binary_chunk(chunk: bytes) -> bool:
    """
    A NUL byte, or too many control bytes in the sample, means binary.
    Bytes >= 0x80 count as text so UTF-8 stays text.
    """
    if not chunk:
        return False
    if b"\0" in chunk:
        return True
    non_text = chunk.translate(None, _TEXT_BYTES)
    return len(non_text) / len(chunk) > BINARY_NON_TEXT_RATIO


def classify(entry: CandidateEntry, console: Console, max_bytes: Optional[int] = None) -> Optional[FileRecord]:
    """
    Reads one candidate. Returns None when the file cannot be read or is not
    valid UTF-8; binary files come back with ``is_binary`` set and no content.

    A text file larger than ``max_bytes`` is not read past the sniffed
    prefix: it comes back with its size and no content.
    """
    display_path = entry.path.as_posix()
    ext = file_extension(entry.path.name) or None

    try:
        with open(entry.path, "rb") as f:
            head = f.read(BINARY_SNIFF_BYTES)
            size = os.fstat(f.fileno()).st_size
            if is_binary_chunk(head):
                return FileRecord(path=display_path, extension=ext, size_bytes=size, content="", is_binary=True)
            if max_bytes is not None and size > max_bytes:
                return FileRecord(path=display_path, extension=ext, size_bytes=size, content="")
            data = head + f.read()
    except OSError as e:
        console.warn(f"Skipping {display_path} (read error: {e})")
        return None

    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError:
        console.warn(f"Skipping {display_path} (not valid UTF-8)")
        return None

    return FileRecord(path=display_path, extension=ext, size_bytes=len(data), content=content)
