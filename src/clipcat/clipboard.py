# src/clipcat/clipboard.py
import pyperclip

from clipcat.errors import ClipboardError


def copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Could not write to the clipboard: {e}") from e
