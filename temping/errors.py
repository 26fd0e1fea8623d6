"""Exceptions raised by temping sandboxes."""
from __future__ import annotations


class TempingError(Exception):
    """Base class for sandbox failures. ``path`` names the offending path."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class RootNotADirectoryError(TempingError):
    pass


class RootNotWritableError(TempingError):
    pass


class TempFileNotFoundError(TempingError):
    pass


class WriteFailedError(TempingError):
    pass


class HandleNotFoundError(TempingError):
    def __init__(self, handle: object) -> None:
        super().__init__(f"No file recorded for handle {handle!r}")
        self.handle = handle
