# src/clipcat/__init__.py
"""Copy the text files of a project to the clipboard as LLM context."""

__version__ = "0.3.0"
