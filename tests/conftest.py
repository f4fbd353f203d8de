# tests/conftest.py
import pytest

from clipcat.utils.tokenizer import Tokenizer


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory, monkeypatch):
    """Keeps the user's global git ignore and tiktoken downloads out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
    monkeypatch.setattr(Tokenizer, "_unavailable", True)


def write_tree(root, files):
    """Creates ``{"a/b.txt": "text" or b"bytes"}`` under ``root``."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree():
    return write_tree
