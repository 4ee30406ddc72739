"""Exceptions raised by the editing core."""


class EditorError(Exception):
    """Base class for recoverable editor errors."""


class DocumentNotFoundError(EditorError, FileNotFoundError):
    """Raised when a document is loaded from a path that does not exist."""

    def __init__(self, path: str):
        super().__init__(f"No such file: {path}")
        self.path = path


class DocumentSaveError(EditorError):
    """Raised when writing a document to disk fails."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot save to {path}: {reason}")
        self.path = path
        self.reason = reason


class NoFilePathError(EditorError):
    """Raised when saving a document that is not bound to a file."""
