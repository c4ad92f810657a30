"""Worker that downloads one item asset and converts it into a ``QImage``."""

from __future__ import annotations

import logging

import httpx
from PIL.ImageQt import ImageQt
from PySide6.QtCore import QObject, QRunnable, Qt, Signal
from PySide6.QtGui import QImage

from ....errors import AssetLoadError
from ....io.asset_fetcher import fetch_asset_image

LOGGER = logging.getLogger(__name__)


class AssetLoaderSignals(QObject):
    """Signals emitted by :class:`AssetLoaderWorker`."""

    ready = Signal(int, int, QImage)
    """Emitted with the view generation, the item id and its decoded, scaled image."""

    failed = Signal(int, int)
    """Emitted with the view generation and the item id when the asset could not be used."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)


class AssetLoaderWorker(QRunnable):
    """Resolve ``asset_ref`` for a single item in a :class:`QThreadPool` worker."""

    def __init__(
        self,
        client: httpx.Client,
        item_id: int,
        asset_ref: str,
        *,
        max_edge: int,
        generation: int = 0,
    ) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._client = client
        self._item_id = item_id
        self._asset_ref = asset_ref
        self._max_edge = max(1, int(max_edge))
        self._generation = generation
        self.signals = AssetLoaderSignals()

    @property
    def item_id(self) -> int:
        return self._item_id

    @property
    def generation(self) -> int:
        return self._generation

    def run(self) -> None:  # type: ignore[override]
        try:
            pil_image = fetch_asset_image(self._client, self._item_id, self._asset_ref)
            qt_source = ImageQt(pil_image)
            # ``copy`` detaches the pixels from the buffer kept alive by ``qt_source``.
            image = QImage(qt_source.copy())
        except AssetLoadError as exc:
            LOGGER.debug("%s", exc)
            self.signals.failed.emit(self._generation, self._item_id)
            return
        except Exception:  # pragma: no cover - a broken asset must never take down the grid
            LOGGER.exception("Asset %s could not be converted", self._item_id)
            self.signals.failed.emit(self._generation, self._item_id)
            return

        if image.isNull():
            self.signals.failed.emit(self._generation, self._item_id)
            return
        if image.width() > self._max_edge or image.height() > self._max_edge:
            image = image.scaled(
                self._max_edge,
                self._max_edge,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        self.signals.ready.emit(self._generation, self._item_id, image)


__all__ = ["AssetLoaderSignals", "AssetLoaderWorker"]
