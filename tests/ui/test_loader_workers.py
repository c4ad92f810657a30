from __future__ import annotations

import io
import json

import httpx
from PIL import Image

from iCatalog.gui.ui.tasks.asset_loader_worker import AssetLoaderWorker
from iCatalog.gui.ui.tasks.catalog_loader_worker import CatalogLoaderWorker
from iCatalog.models.item import Item


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _png_response(size) -> httpx.Response:
    buffer = io.BytesIO()
    Image.new("RGBA", size, (10, 20, 30, 255)).save(buffer, format="PNG")
    return httpx.Response(200, content=buffer.getvalue(), headers={"content-type": "image/png"})


def test_catalog_worker_emits_loaded(qapp, tmp_path) -> None:
    snapshot = tmp_path / "items.json"
    snapshot.write_text(json.dumps([{"id": 1, "name": "A"}]), encoding="utf-8")
    worker = CatalogLoaderWorker(3, snapshot=snapshot)
    loaded = []
    worker.signals.loaded.connect(lambda generation, items: loaded.append((generation, items)))

    worker.run()

    assert loaded == [(3, [Item(1, "A")])]


def test_catalog_worker_emits_failed(qapp) -> None:
    with _client(lambda request: httpx.Response(500)) as client:
        worker = CatalogLoaderWorker(4, url="https://catalog.test/", snapshot=None, client=client)
        failed = []
        worker.signals.failed.connect(lambda generation, reason: failed.append((generation, reason)))
        worker.run()

    assert failed and failed[0][0] == 4
    assert "HTTP 500" in failed[0][1]


def test_asset_worker_scales_large_images(qapp) -> None:
    with _client(lambda request: _png_response((400, 200))) as client:
        worker = AssetLoaderWorker(client, 7, "https://cdn.test/7.webp", max_edge=100, generation=2)
        ready = []
        worker.signals.ready.connect(
            lambda generation, item_id, image: ready.append((generation, item_id, image))
        )
        worker.run()

    [(generation, item_id, image)] = ready
    assert generation == 2
    assert item_id == 7
    assert image.width() == 100
    assert image.height() == 50


def test_asset_worker_reports_failure(qapp) -> None:
    with _client(lambda request: httpx.Response(404)) as client:
        worker = AssetLoaderWorker(client, 8, "https://cdn.test/8.webp", max_edge=100)
        failed = []
        worker.signals.failed.connect(lambda generation, item_id: failed.append((generation, item_id)))
        worker.run()

    assert failed == [(0, 8)]
