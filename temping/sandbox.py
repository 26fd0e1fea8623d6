"""Disposable filesystem sandbox for test suites."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from temping.config.sandbox_config import get_default_root
from temping.errors import (
    RootNotADirectoryError,
    RootNotWritableError,
    TempFileNotFoundError,
    WriteFailedError,
)
from temping.handles import HandleTable
from temping.logging.logger import get_logger
from temping.paths import PathArg, ensure_trailing_separator, normalize_relative, remove_tree

logger = get_logger(__name__)

Content = Union[str, bytes, bytearray]

DIRECTORY_MODE = 0o777


class Temping:
    """A root directory that test code can fill freely and tear down in one call.

    The root is created lazily: construction never touches the filesystem and
    every mutating call runs :meth:`init` first. :meth:`reset` removes the
    whole tree, after which the sandbox can be used again from scratch.

    Paths are always relative to the root. A leading separator is ignored and
    repeated separators collapse, so ``"/a//b.txt"`` and ``"a/b.txt"`` are the
    same file.
    """

    def __init__(self, directory: Optional[PathArg] = None, *, encoding: str = "utf-8") -> None:
        if directory is None:
            self._dir = get_default_root()
        else:
            self._dir = ensure_trailing_separator(os.path.abspath(os.fspath(directory)))
        self.encoding = encoding
        self.initialized = False
        self.handles = HandleTable()

    def __repr__(self) -> str:
        return f"Temping({self._dir!r}, initialized={self.initialized})"

    def __enter__(self) -> "Temping":
        return self.init()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def _root(self) -> Path:
        return Path(self._dir)

    def init(self) -> "Temping":
        """Make sure the root directory exists and is writable."""

        root = self._root
        if not root.exists() and not root.is_symlink():
            try:
                root.mkdir(DIRECTORY_MODE)
                logger.info("Created sandbox root %s", self._dir)
            except FileExistsError:
                pass
        if not root.is_dir():
            raise RootNotADirectoryError(f"Sandbox root is not a directory: {root}", str(root))
        if not os.access(root, os.W_OK):
            raise RootNotWritableError(f"Sandbox root is not writable: {root}", str(root))
        self.initialized = True
        return self

    def reset(self) -> "Temping":
        """Delete the root and everything in it, and forget all handles."""

        if not self.initialized:
            return self
        self._remove_root()
        return self

    def _remove_root(self) -> None:
        remove_tree(self._root)
        self.handles.clear()
        self.initialized = False
        logger.info("Removed sandbox root %s", self._dir)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, path: PathArg, content: Content = "") -> "Temping":
        """Write ``content`` to ``path``, creating parent directories as needed."""

        self._write(normalize_relative(path), content)
        return self

    def create_with_handle(self, path: PathArg, content: Content = "") -> int:
        """Like :meth:`create`, but return an integer handle for the file.

        Creating the same path again overwrites it and returns the same handle.
        """

        relative = normalize_relative(path)
        self._write(relative, content)
        return self.handles.register(relative)

    def resolve_handle(self, handle: int) -> str:
        return self.handles.resolve(handle)

    def create_directory(self, path: PathArg) -> "Temping":
        self.init()
        target = Path(self.get_pathname(path))
        target.mkdir(DIRECTORY_MODE, parents=True, exist_ok=True)
        logger.debug("Created directory %s", target)
        return self

    def set_contents(self, path: PathArg, content: Content) -> "Temping":
        self._write(normalize_relative(path), content)
        return self

    def delete(self, path: PathArg, recursive: bool = False) -> "Temping":
        """Remove a file or directory.

        Missing paths are ignored. A directory that still has entries is only
        removed when ``recursive`` is true; otherwise the call does nothing.
        The root itself (an empty path or ``"/"``) follows the same rules and
        leaves the sandbox uninitialized once removed.
        """

        relative = normalize_relative(path)
        self.init()
        target = Path(self._absolute(relative)) if relative else self._root
        if not target.exists() and not target.is_symlink():
            return self
        if target.is_symlink() or not target.is_dir():
            target.unlink(missing_ok=True)
            logger.debug("Deleted %s", target)
            return self
        if not recursive and any(target.iterdir()):
            logger.debug("Refusing to delete non-empty directory %s", target)
            return self
        if not relative:
            self._remove_root()
            return self
        remove_tree(target)
        logger.debug("Deleted directory %s", target)
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_contents(self, path: PathArg) -> str:
        return self.get_bytes(path).decode(self.encoding)

    def get_bytes(self, path: PathArg) -> bytes:
        target = Path(self.get_pathname(path))
        if not target.is_file():
            raise TempFileNotFoundError(f"File not found: {target}", str(target))
        return target.read_bytes()

    def get_pathname(self, path: PathArg) -> str:
        """Absolute path for ``path`` under the root. Existence is not checked."""

        return self._absolute(normalize_relative(path))

    def get_directory(self) -> str:
        return self._dir

    def exists(self, path: Optional[PathArg] = None) -> bool:
        if path is None:
            return self._root.is_dir()
        return Path(self.get_pathname(path)).exists()

    def is_empty(self, path: Optional[PathArg] = None) -> bool:
        """True when the target is missing or a directory with no entries.

        Dotfiles count as entries. Anything else that exists is not empty.
        """

        target = self._root if path is None else Path(self.get_pathname(path))
        if target.is_dir():
            return not any(target.iterdir())
        return not target.exists() and not target.is_symlink()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _absolute(self, relative: str) -> str:
        return self._dir + relative.replace("/", os.sep)

    def _encode(self, content: Content) -> bytes:
        if isinstance(content, str):
            return content.encode(self.encoding)
        if isinstance(content, (bytes, bytearray)):
            return bytes(content)
        raise TypeError(f"content must be str or bytes, not {type(content).__name__}")

    def _write(self, relative: str, content: Content) -> None:
        data = self._encode(content)
        self.init()
        target = Path(self._absolute(relative))
        if "/" in relative:
            target.parent.mkdir(DIRECTORY_MODE, parents=True, exist_ok=True)
        try:
            with target.open("wb") as fh:
                written = fh.write(data)
        except OSError as exc:
            raise WriteFailedError(f"Could not write {target}: {exc}", str(target)) from exc
        if written != len(data):
            raise WriteFailedError(f"Short write to {target}: {written} of {len(data)} bytes", str(target))
        logger.debug("Wrote %d bytes to %s", written, target)
