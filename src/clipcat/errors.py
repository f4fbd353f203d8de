# src/clipcat/errors.py


class ClipcatError(Exception):
    """Base class for errors that abort a run."""


class ConfigError(ClipcatError):
    """Invalid roots or flag values, raised before any file is read."""


class ClipboardError(ClipcatError):
    """The rendered output could not be handed to the clipboard."""
