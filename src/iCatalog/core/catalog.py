"""Process-wide catalog with its tri-state readiness flag."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..models.item import Item

logger = logging.getLogger(__name__)


class CatalogStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Catalog:
    """Read-only item sequence populated by a single load attempt.

    ``LOADING`` moves to either ``READY`` or ``ERROR`` exactly once. Any
    outcome that arrives afterwards is ignored, so a late response can never
    resurrect a failed load or replace a loaded catalog.
    """

    def __init__(self) -> None:
        self._items: Tuple[Item, ...] = ()
        self._status = CatalogStatus.LOADING
        self._error: Optional[str] = None

    @property
    def status(self) -> CatalogStatus:
        return self._status

    @property
    def items(self) -> Tuple[Item, ...]:
        return self._items

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_ready(self) -> bool:
        return self._status is CatalogStatus.READY

    def mark_ready(self, items: Sequence[Item]) -> bool:
        if self._status is not CatalogStatus.LOADING:
            logger.info("Ignoring catalog result received in %s state", self._status.value)
            return False
        self._items = tuple(items)
        self._status = CatalogStatus.READY
        logger.info("Catalog ready with %d items", len(self._items))
        return True

    def mark_failed(self, reason: str) -> bool:
        if self._status is not CatalogStatus.LOADING:
            logger.info("Ignoring catalog failure received in %s state", self._status.value)
            return False
        self._status = CatalogStatus.ERROR
        self._error = reason
        logger.warning("Catalog load failed: %s", reason)
        return True

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Catalog", "CatalogStatus"]
