"""Inbound events raised by the presentation layer.

Viewport growth has its own event type so the pagination policy never needs
to know why more items were requested.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from ..models.item import Item


@dataclass(frozen=True)
class QueryTextChanged:
    text: str


@dataclass(frozen=True)
class RangeSubmitted:
    low: float
    high: float


@dataclass(frozen=True)
class BackRequested:
    pass


@dataclass(frozen=True)
class ViewportNearEnd:
    pass


@dataclass(frozen=True)
class AssetLoadFailed:
    item_id: int


@dataclass(frozen=True)
class ItemActivated:
    item_id: int


@dataclass(frozen=True)
class OverlayDismissed:
    pass


@dataclass(frozen=True)
class CatalogLoaded:
    items: Sequence[Item]


@dataclass(frozen=True)
class CatalogLoadFailed:
    reason: str


Event = Union[
    QueryTextChanged,
    RangeSubmitted,
    BackRequested,
    ViewportNearEnd,
    AssetLoadFailed,
    ItemActivated,
    OverlayDismissed,
    CatalogLoaded,
    CatalogLoadFailed,
]

__all__ = [
    "AssetLoadFailed",
    "BackRequested",
    "CatalogLoadFailed",
    "CatalogLoaded",
    "Event",
    "ItemActivated",
    "OverlayDismissed",
    "QueryTextChanged",
    "RangeSubmitted",
    "ViewportNearEnd",
]
