"""Background worker that performs the one-shot catalog load."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx
from PySide6.QtCore import QObject, QRunnable, Signal

from ....config import CATALOG_FILE, CATALOG_URL
from ....errors import CatalogError
from ....io.catalog_source import load_catalog

LOGGER = logging.getLogger(__name__)


class CatalogLoaderSignals(QObject):
    """Signals emitted by :class:`CatalogLoaderWorker`."""

    loaded = Signal(int, list)
    """Emitted with the generation id and the ordered list of items."""

    failed = Signal(int, str)
    """Emitted with the generation id and a human readable reason."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)


class CatalogLoaderWorker(QRunnable):
    """Fetch the full catalog on a :class:`QThreadPool` thread."""

    def __init__(
        self,
        generation: int,
        *,
        url: str = CATALOG_URL,
        snapshot: Optional[Path] = CATALOG_FILE,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._generation = generation
        self._url = url
        self._snapshot = snapshot
        self._client = client
        self.signals = CatalogLoaderSignals()

    @property
    def generation(self) -> int:
        return self._generation

    def run(self) -> None:  # type: ignore[override]
        try:
            items = load_catalog(url=self._url, snapshot=self._snapshot, client=self._client)
        except CatalogError as exc:
            self.signals.failed.emit(self._generation, str(exc))
            return
        except Exception as exc:  # pragma: no cover - unexpected failures still end the load
            LOGGER.exception("Catalog load crashed")
            self.signals.failed.emit(self._generation, str(exc))
            return
        self.signals.loaded.emit(self._generation, items)


__all__ = ["CatalogLoaderSignals", "CatalogLoaderWorker"]
