"""Disposable filesystem sandboxes for test suites."""
from temping.errors import (
    HandleNotFoundError,
    RootNotADirectoryError,
    RootNotWritableError,
    TempFileNotFoundError,
    TempingError,
    WriteFailedError,
)
from temping.handles import HandleTable
from temping.sandbox import Temping

__all__ = [
    "HandleNotFoundError",
    "HandleTable",
    "RootNotADirectoryError",
    "RootNotWritableError",
    "TempFileNotFoundError",
    "Temping",
    "TempingError",
    "WriteFailedError",
]
