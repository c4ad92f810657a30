"""Session state machine tying the catalog, filters and pagination together.

Every inbound event from the presentation layer goes through :class:`Session`.
The session is the single writer of all browsing state; the view reads the
result through :meth:`Session.render` after each event.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from ..config import ASSET_BASE_URL, BATCH_SIZE
from ..models.item import Item, asset_url
from .catalog import Catalog, CatalogStatus
from .events import (
    AssetLoadFailed,
    BackRequested,
    CatalogLoaded,
    CatalogLoadFailed,
    Event,
    ItemActivated,
    OverlayDismissed,
    QueryTextChanged,
    RangeSubmitted,
    ViewportNearEnd,
)
from .failure_mask import FailureMask
from .filters import NoQuery, Query, RangeQuery, TextQuery, coerce_bound, evaluate, text_query_for
from .overlay import DetailOverlay, OverlayContent
from .pagination import PaginationController

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    WELCOME = "welcome"
    SEARCH_ACTIVE = "search_active"
    RANGE_ACTIVE = "range_active"


@dataclass(frozen=True)
class Welcome:
    phase: ClassVar[SessionPhase] = SessionPhase.WELCOME

    @property
    def query(self) -> Query:
        return NoQuery()


@dataclass(frozen=True)
class SearchActive:
    query: TextQuery
    phase: ClassVar[SessionPhase] = SessionPhase.SEARCH_ACTIVE


@dataclass(frozen=True)
class RangeActive:
    query: RangeQuery
    phase: ClassVar[SessionPhase] = SessionPhase.RANGE_ACTIVE


SessionState = Union[Welcome, SearchActive, RangeActive]


@dataclass(frozen=True)
class RenderedItem:
    """One grid cell as handed to the view."""

    id: int
    name: str
    asset_ref: str


@dataclass(frozen=True)
class SessionView:
    """Read-only snapshot of everything the view needs after an event."""

    phase: SessionPhase
    status: CatalogStatus
    items: Tuple[RenderedItem, ...]
    overlay: Optional[OverlayContent]
    cursor: int
    result_count: int
    range_enabled: bool

    @property
    def gallery_visible(self) -> bool:
        return self.phase is not SessionPhase.WELCOME

    @property
    def welcome_visible(self) -> bool:
        return self.phase is not SessionPhase.RANGE_ACTIVE

    @property
    def welcome_compact(self) -> bool:
        return self.phase is SessionPhase.SEARCH_ACTIVE


class Session:
    """Drive the browsing session from presentation events."""

    def __init__(
        self,
        *,
        batch_size: int = BATCH_SIZE,
        asset_base: str = ASSET_BASE_URL,
        catalog: Optional[Catalog] = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else Catalog()
        self._pagination = PaginationController(batch_size)
        self._mask = FailureMask()
        self._overlay = DetailOverlay()
        self._asset_base = asset_base
        self._state: SessionState = Welcome()

        self._handlers: Dict[type, Callable[[Any], Any]] = {
            QueryTextChanged: lambda e: self.on_query_text_changed(e.text),
            RangeSubmitted: lambda e: self.on_range_submit(e.low, e.high),
            BackRequested: lambda e: self.on_back_requested(),
            ViewportNearEnd: lambda e: self.on_viewport_near_end(),
            AssetLoadFailed: lambda e: self.on_asset_load_error(e.item_id),
            ItemActivated: lambda e: self.on_item_activated(e.item_id),
            OverlayDismissed: lambda e: self.on_overlay_dismissed(),
            CatalogLoaded: lambda e: self.on_catalog_loaded(e.items),
            CatalogLoadFailed: lambda e: self.on_catalog_failed(e.reason),
        }

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def status(self) -> CatalogStatus:
        return self._catalog.status

    @property
    def pagination(self) -> PaginationController:
        return self._pagination

    @property
    def failure_mask(self) -> FailureMask:
        return self._mask

    @property
    def overlay(self) -> DetailOverlay:
        return self._overlay

    @property
    def range_enabled(self) -> bool:
        return self._catalog.is_ready and self.phase is SessionPhase.WELCOME

    def can_extend(self) -> bool:
        return self.phase is not SessionPhase.WELCOME and self._pagination.can_extend()

    def rendered_items(self) -> List[RenderedItem]:
        """Return the visible window minus masked IDs, ready for display."""
        if self.phase is SessionPhase.WELCOME:
            return []
        return self._render(self._pagination.visible_window())

    def render(self) -> SessionView:
        return SessionView(
            phase=self.phase,
            status=self.status,
            items=tuple(self.rendered_items()),
            overlay=self._overlay.content,
            cursor=self._pagination.cursor,
            result_count=self._pagination.total,
            range_enabled=self.range_enabled,
        )

    # ------------------------------------------------------------------
    # Event entry points
    # ------------------------------------------------------------------
    def dispatch(self, event: Event) -> Any:
        """Route *event* to its handler and return the handler's result."""
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported session event: {event!r}")
        return handler(event)

    def on_query_text_changed(self, text: str) -> bool:
        """Apply a search-field change; return ``True`` when the gallery was rebuilt."""

        if self.phase is SessionPhase.RANGE_ACTIVE:
            logger.debug("Search text ignored while a range is active")
            return False

        query = text_query_for(text)
        if isinstance(query, NoQuery):
            if self.phase is SessionPhase.WELCOME:
                return False
            self._state = Welcome()
            self._pagination.clear()
            return True

        self._state = SearchActive(query)
        self._apply(query)
        return True

    def on_range_submit(self, low: Union[str, float], high: Union[str, float]) -> bool:
        """Show the inclusive ID range; a no-op until the catalog is ready."""

        if not self._catalog.is_ready:
            logger.debug("Range submit ignored: catalog is %s", self.status.value)
            return False
        if self.phase is not SessionPhase.WELCOME:
            logger.debug("Range submit ignored in %s", self.phase.value)
            return False

        query = RangeQuery(coerce_bound(low), coerce_bound(high))
        self._state = RangeActive(query)
        self._apply(query)
        return True

    def on_back_requested(self) -> bool:
        """Return to the welcome state, forgetting the query and the failure mask."""

        if self.phase is SessionPhase.WELCOME:
            return False
        self._state = Welcome()
        self._pagination.clear()
        self._mask.clear()
        self._overlay.close()
        return True

    def on_viewport_near_end(self) -> List[RenderedItem]:
        """Grow the visible window by one batch and return the newly rendered items."""

        if self.phase is SessionPhase.WELCOME:
            return []
        revealed = self._pagination.extend()
        if revealed:
            logger.debug(
                "Revealed %d items (%d/%d)",
                len(revealed),
                self._pagination.cursor,
                self._pagination.total,
            )
        return self._render(revealed)

    def on_asset_load_error(self, item_id: int) -> bool:
        """Mask *item_id*; return ``True`` when that removed a rendered item."""

        was_rendered = any(item.id == item_id for item in self.rendered_items())
        if not self._mask.add(item_id):
            return False
        logger.debug("Asset for item %s failed to load; hiding it", item_id)
        return was_rendered

    def on_item_activated(self, item_id: int) -> bool:
        for item in self.rendered_items():
            if item.id == item_id:
                self._overlay.open(OverlayContent(item.id, item.name, item.asset_ref))
                return True
        logger.debug("Activation ignored for item %s: not rendered", item_id)
        return False

    def on_overlay_dismissed(self) -> bool:
        return self._overlay.close()

    def on_catalog_loaded(self, items: Sequence[Item]) -> bool:
        if not self._catalog.mark_ready(items):
            return False
        if isinstance(self._state, SearchActive):
            self._apply(self._state.query)
        return True

    def on_catalog_failed(self, reason: str) -> bool:
        return self._catalog.mark_failed(reason)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply(self, query: Query) -> None:
        results = evaluate(self._catalog.items, query)
        self._pagination.reset(results)
        logger.debug("%r matched %d items", query, len(results))

    def _render(self, items: Sequence[Item]) -> List[RenderedItem]:
        return [
            RenderedItem(item.id, item.display_name, asset_url(item.id, self._asset_base))
            for item in self._mask.apply(items)
        ]


__all__ = [
    "RangeActive",
    "RenderedItem",
    "SearchActive",
    "Session",
    "SessionPhase",
    "SessionState",
    "SessionView",
    "Welcome",
]
