"""Integer handles for files created inside a sandbox."""
from __future__ import annotations

from typing import List, Optional

from temping.errors import HandleNotFoundError


class HandleTable:
    """Ordered record of created paths; a handle is the 1-based position.

    Handles never move once allocated. ``clear`` drops them all at once.
    """

    def __init__(self) -> None:
        self._paths: List[str] = []

    def register(self, path: str) -> int:
        """Return the handle for ``path``, allocating the next one if it is new."""

        existing = self.handle_for(path)
        if existing is not None:
            return existing
        self._paths.append(path)
        return len(self._paths)

    def handle_for(self, path: str) -> Optional[int]:
        try:
            return self._paths.index(path) + 1
        except ValueError:
            return None

    def resolve(self, handle: int) -> str:
        if isinstance(handle, bool) or not isinstance(handle, int):
            raise HandleNotFoundError(handle)
        if handle < 1 or handle > len(self._paths):
            raise HandleNotFoundError(handle)
        return self._paths[handle - 1]

    def clear(self) -> None:
        self._paths.clear()

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths
