"""Controller that feeds presentation events into the browsing session."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

import httpx
from PySide6.QtCore import QObject, QThreadPool, Signal, Slot
from PySide6.QtGui import QImage

from ....core.events import (
    AssetLoadFailed,
    BackRequested,
    CatalogLoaded,
    CatalogLoadFailed,
    ItemActivated,
    OverlayDismissed,
    QueryTextChanged,
    RangeSubmitted,
)
from ....core.overlay import OverlayContent
from ....core.session import RenderedItem, Session, SessionPhase, SessionView
from ..models.item_list_model import ItemListModel
from ..tasks.asset_loader_worker import AssetLoaderWorker
from ..tasks.catalog_loader_worker import CatalogLoaderWorker
from ..widgets.main_window_metrics import OVERLAY_IMAGE_EDGE

logger = logging.getLogger(__name__)


class SessionController(QObject):
    """Own the :class:`Session` and translate widget signals into core events.

    Worker results are delivered through queued signals so every session
    mutation happens on the GUI thread, one event at a time. The item list
    model handles viewport growth itself through ``fetchMore``.
    """

    viewChanged = Signal(object)
    """Emitted with a fresh :class:`SessionView` after every handled event."""

    def __init__(
        self,
        session: Session,
        model: ItemListModel,
        *,
        client: Optional[httpx.Client] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._model = model
        self._client = client if client is not None else httpx.Client(follow_redirects=True)
        self._owns_client = client is None
        self._catalog_generation = 0
        self._view_generation = 0
        self._pending_assets: Set[int] = set()

        self._model.rowsRevealed.connect(self._on_rows_revealed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def session(self) -> Session:
        return self._session

    @property
    def model(self) -> ItemListModel:
        return self._model

    def current_view(self) -> SessionView:
        return self._session.render()

    def start(self) -> None:
        """Kick off the one-shot catalog load."""

        self._catalog_generation += 1
        worker = CatalogLoaderWorker(self._catalog_generation)
        worker.signals.loaded.connect(self._on_catalog_loaded)
        worker.signals.failed.connect(self._on_catalog_failed)
        QThreadPool.globalInstance().start(worker)
        self._emit_view()

    def shutdown(self) -> None:
        """Drop late worker results and release the HTTP client."""

        self._catalog_generation += 1
        self._view_generation += 1
        self._pending_assets.clear()
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------
    # Presentation events
    # ------------------------------------------------------------------
    @Slot(str)
    def handle_query_text_changed(self, text: str) -> None:
        if self._session.dispatch(QueryTextChanged(text)):
            self._reload_model()
        self._emit_view()

    @Slot(str, str)
    def handle_range_submit(self, low: str, high: str) -> None:
        if self._session.dispatch(RangeSubmitted(low, high)):
            self._reload_model()
        self._emit_view()

    @Slot()
    def handle_back_requested(self) -> None:
        if self._session.dispatch(BackRequested()):
            # Late asset results belong to the gallery that was just left.
            self._view_generation += 1
            self._pending_assets.clear()
            self._model.set_fetch_suppressed(False)
            self._reload_model()
        self._emit_view()

    @Slot(int)
    def handle_item_activated(self, item_id: int) -> None:
        if self._session.dispatch(ItemActivated(item_id)):
            self._model.set_fetch_suppressed(True)
            self._request_assets([self._session.overlay.content])
            self._emit_view()

    @Slot()
    def handle_overlay_dismissed(self) -> None:
        if self._session.dispatch(OverlayDismissed()):
            self._model.set_fetch_suppressed(False)
            self._emit_view()

    # ------------------------------------------------------------------
    # Worker callbacks
    # ------------------------------------------------------------------
    @Slot(int, list)
    def _on_catalog_loaded(self, generation: int, items: list) -> None:
        if generation != self._catalog_generation:
            logger.debug("Dropping stale catalog result (generation %s)", generation)
            return
        if self._session.dispatch(CatalogLoaded(items)):
            if self._session.phase is not SessionPhase.WELCOME:
                self._reload_model()
        self._emit_view()

    @Slot(int, str)
    def _on_catalog_failed(self, generation: int, message: str) -> None:
        if generation != self._catalog_generation:
            logger.debug("Dropping stale catalog failure (generation %s)", generation)
            return
        self._session.dispatch(CatalogLoadFailed(message))
        self._emit_view()

    @Slot(int, int, QImage)
    def _on_asset_ready(self, generation: int, item_id: int, image: QImage) -> None:
        if generation != self._view_generation:
            logger.debug("Dropping stale asset for item %s (generation %s)", item_id, generation)
            return
        self._pending_assets.discard(item_id)
        self._model.set_thumbnail(item_id, image)
        content = self._session.overlay.content
        if content is not None and content.id == item_id:
            self._emit_view()

    @Slot(int, int)
    def _on_asset_failed(self, generation: int, item_id: int) -> None:
        if generation != self._view_generation:
            logger.debug("Dropping stale asset failure for item %s (generation %s)", item_id, generation)
            return
        self._pending_assets.discard(item_id)
        if self._session.dispatch(AssetLoadFailed(item_id)):
            self._model.remove_item(item_id)
            self._emit_view()

    @Slot(list)
    def _on_rows_revealed(self, items: List[RenderedItem]) -> None:
        self._request_assets(items)
        self._emit_view()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _reload_model(self) -> None:
        self._model.reload()
        self._request_assets(self._model.items())

    def _request_assets(
        self, items: Iterable[Optional[RenderedItem | OverlayContent]]
    ) -> None:
        pool = QThreadPool.globalInstance()
        for item in items:
            if item is None:
                continue
            item_id = item.id
            if item_id in self._pending_assets or self._model.has_thumbnail(item_id):
                continue
            self._pending_assets.add(item_id)
            worker = AssetLoaderWorker(
                self._client,
                item_id,
                item.asset_ref,
                max_edge=OVERLAY_IMAGE_EDGE,
                generation=self._view_generation,
            )
            worker.signals.ready.connect(self._on_asset_ready)
            worker.signals.failed.connect(self._on_asset_failed)
            pool.start(worker)

    def _emit_view(self) -> None:
        self.viewChanged.emit(self._session.render())


__all__ = ["SessionController"]
