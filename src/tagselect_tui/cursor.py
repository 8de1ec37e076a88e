"""Keyboard highlight over the suggestion list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

NO_HIGHLIGHT = -1


class NavigationCursor:
    """Index of the highlighted suggestion, or ``NO_HIGHLIGHT``.

    Movement saturates at both ends instead of wrapping.  Moving up from
    the first row clears the highlight.
    """

    def __init__(self) -> None:
        self._index = NO_HIGHLIGHT

    def __repr__(self) -> str:
        return f"NavigationCursor(index={self._index})"

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_none(self) -> bool:
        return self._index == NO_HIGHLIGHT

    def move_next(self, length: int) -> int:
        """Move the highlight down a list of *length* rows."""
        if length <= 0:
            self._index = NO_HIGHLIGHT
        else:
            self._index = min(self._index + 1, length - 1)
        return self._index

    def move_previous(self) -> int:
        """Move the highlight up, down to no highlight at all."""
        self._index = max(self._index - 1, NO_HIGHLIGHT)
        return self._index

    def reset(self) -> None:
        self._index = NO_HIGHLIGHT

    def activate(self, entries: Sequence[T]) -> T | None:
        """Return the highlighted entry, or None if nothing valid is highlighted."""
        if self._index == NO_HIGHLIGHT or not 0 <= self._index < len(entries):
            return None
        return entries[self._index]
