"""Cursor-based pagination over an in-memory result set."""

from __future__ import annotations

from typing import List, Sequence

from ..config import BATCH_SIZE
from ..models.item import Item


class PaginationController:
    """Expose a growing prefix of the active result set.

    The controller knows nothing about scrolling. It is told to :meth:`reset`
    when a new result set arrives and to :meth:`extend` whenever the view
    reports that the user is close to the end of what is shown.
    """

    def __init__(self, batch_size: int = BATCH_SIZE) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self._batch_size = batch_size
        self._results: List[Item] = []
        self._cursor = 0

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def total(self) -> int:
        """Length of the (unmasked) result set the cursor counts against."""
        return len(self._results)

    @property
    def results(self) -> List[Item]:
        return list(self._results)

    def reset(self, results: Sequence[Item]) -> List[Item]:
        """Adopt *results* and reveal the first batch."""
        self._results = list(results)
        self._cursor = min(self._batch_size, len(self._results))
        return self.visible_window()

    def clear(self) -> None:
        self._results = []
        self._cursor = 0

    def can_extend(self) -> bool:
        return self._cursor < len(self._results)

    def extend(self) -> List[Item]:
        """Reveal the next batch and return only the newly revealed items.

        Calling this once everything is visible is a harmless no-op that
        returns an empty list.
        """

        if not self.can_extend():
            return []
        start = self._cursor
        self._cursor = min(self._cursor + self._batch_size, len(self._results))
        return self._results[start:self._cursor]

    def visible_window(self) -> List[Item]:
        return self._results[:self._cursor]


__all__ = ["PaginationController"]
