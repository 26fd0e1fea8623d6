"""Path normalization and bottom-up tree removal."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from temping.logging.logger import get_logger

logger = get_logger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


def normalize_relative(path: PathArg) -> str:
    """Turn a caller path into a clean ``/``-joined path relative to the root.

    Leading separators are ignored and runs of separators collapse, so
    ``"/a//b.txt"`` and ``"a/b.txt"`` name the same file. ``.`` segments are
    dropped. ``..`` is left alone.
    """

    raw = os.fsdecode(os.fspath(path))
    if os.sep != "/":
        raw = raw.replace(os.sep, "/")
    return "/".join(part for part in raw.split("/") if part and part != ".")


def ensure_trailing_separator(path: PathArg) -> str:
    raw = os.fsdecode(os.fspath(path))
    return raw.rstrip("/" + os.sep) + os.sep


def _remove_dir(path: Path) -> None:
    try:
        path.rmdir()
    except FileNotFoundError:
        # Removed by someone else while we were walking.
        logger.debug("Already gone: %s", path)


def remove_tree(path: PathArg) -> None:
    """Delete ``path`` and everything beneath it.

    Children sort after their parents, so walking the reverse-sorted listing
    empties every directory before it is removed. Symlinks are unlinked,
    never followed.
    """

    root = Path(path)
    if root.is_dir() and not root.is_symlink():
        for child in sorted(root.rglob("*"), reverse=True):
            if child.is_dir() and not child.is_symlink():
                _remove_dir(child)
            else:
                child.unlink(missing_ok=True)
        _remove_dir(root)
    else:
        root.unlink(missing_ok=True)
