"""Exceptions raised by the editor core and its terminal adapter."""


class EditorError(Exception):
    """Base class for editor errors."""


class DocumentOpenError(EditorError):
    """A document could not be read from disk."""

    def __init__(self, filename: str, reason: str):
        super().__init__(f"{filename}: {reason}")
        self.filename = filename
        self.reason = reason


class DocumentSaveError(EditorError):
    """A document could not be written to disk."""

    def __init__(self, filename, reason: str):
        super().__init__(f"{filename}: {reason}" if filename else reason)
        self.filename = filename
        self.reason = reason


class TerminalError(EditorError):
    """The terminal can no longer be read from or written to.

    This is fatal: the editor releases the terminal and exits.
    """
