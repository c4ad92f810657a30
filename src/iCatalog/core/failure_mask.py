"""Set of item IDs whose asset failed to load during this session."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Set, TypeVar

from ..models.item import Item

T = TypeVar("T", bound=Item)


class FailureMask:
    """Hide items with broken assets without touching the result set.

    Insertions are idempotent and order independent. The mask only shrinks
    when :meth:`clear` is called on a return to the welcome state.
    """

    def __init__(self) -> None:
        self._ids: Set[int] = set()

    def add(self, item_id: int) -> bool:
        """Mask *item_id*; return ``True`` when it was not masked before."""
        if item_id in self._ids:
            return False
        self._ids.add(item_id)
        return True

    def clear(self) -> None:
        self._ids.clear()

    def apply(self, items: Iterable[T]) -> List[T]:
        """Return *items* without the masked ones, preserving order."""
        return [item for item in items if item.id not in self._ids]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)


__all__ = ["FailureMask"]
