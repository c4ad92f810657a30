"""Immutable catalog item record and payload parsing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Set

from ..config import ASSET_BASE_URL, ASSET_SUFFIX, NAME_PLACEHOLDER
from ..errors import CatalogLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Item:
    """Single catalog entry keyed by its positive integer ``id``."""

    id: int
    name: Optional[str] = None

    @property
    def id_text(self) -> str:
        return str(self.id)

    @property
    def display_name(self) -> str:
        """Return the label shown in the grid, or the placeholder when unnamed."""
        return self.name or NAME_PLACEHOLDER


def asset_url(item_id: int, base: str = ASSET_BASE_URL) -> str:
    """Return the deterministic asset location for *item_id*."""
    return f"{base}{item_id}{ASSET_SUFFIX}"


def _coerce_id(value: Any) -> Optional[int]:
    # ``bool`` is an ``int`` subclass but never a valid identifier.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float) and value.is_integer() and value > 0:
        return int(value)
    return None


def parse_catalog_payload(payload: Any) -> List[Item]:
    """Convert the decoded catalog JSON into an ordered list of :class:`Item`.

    Entries without a usable positive integer ``id`` are skipped and the first
    occurrence wins when an ``id`` repeats. Source order is preserved.
    """

    if not isinstance(payload, list):
        raise CatalogLoadError(
            f"Catalog payload must be a JSON array, got {type(payload).__name__}"
        )

    items: List[Item] = []
    seen: Set[int] = set()
    skipped = 0
    for entry in payload:
        if not isinstance(entry, dict):
            skipped += 1
            continue
        item_id = _coerce_id(entry.get("id"))
        if item_id is None or item_id in seen:
            skipped += 1
            continue
        name = entry.get("name")
        if not isinstance(name, str):
            name = None
        seen.add(item_id)
        items.append(Item(item_id, name))

    if skipped:
        logger.debug("Skipped %d malformed or duplicate catalog entries", skipped)
    return items


__all__ = ["Item", "asset_url", "parse_catalog_payload"]
