from __future__ import annotations

import json

import httpx
import pytest

from iCatalog.errors import CatalogLoadError
from iCatalog.io.catalog_source import fetch_catalog, load_catalog
from iCatalog.models.item import Item

URL = "https://catalog.test/items"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_fetch_catalog_parses_items() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == URL
        return httpx.Response(200, json=[{"id": 2, "name": "Beta"}, {"id": 1}])

    with _client(handler) as client:
        items = fetch_catalog(client, URL)

    assert items == [Item(2, "Beta"), Item(1, None)]


def test_fetch_catalog_http_error() -> None:
    with _client(lambda request: httpx.Response(503)) as client:
        with pytest.raises(CatalogLoadError, match="HTTP 503"):
            fetch_catalog(client, URL)


def test_fetch_catalog_invalid_json() -> None:
    with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(CatalogLoadError, match="not valid JSON"):
            fetch_catalog(client, URL)


def test_fetch_catalog_non_array_payload() -> None:
    with _client(lambda request: httpx.Response(200, json={"error": "nope"})) as client:
        with pytest.raises(CatalogLoadError):
            fetch_catalog(client, URL)


def test_fetch_catalog_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with _client(handler) as client:
        with pytest.raises(CatalogLoadError, match="Timeout"):
            fetch_catalog(client, URL)


def test_fetch_catalog_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with _client(handler) as client:
        with pytest.raises(CatalogLoadError, match="ConnectError"):
            fetch_catalog(client, URL)


def test_load_catalog_prefers_snapshot(tmp_path) -> None:
    snapshot = tmp_path / "items.json"
    snapshot.write_text(json.dumps([{"id": 7, "name": "Seven"}]), encoding="utf-8")

    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not run
        raise AssertionError("network used despite snapshot")

    with _client(handler) as client:
        items = load_catalog(url=URL, snapshot=snapshot, client=client)

    assert items == [Item(7, "Seven")]


def test_load_catalog_missing_snapshot(tmp_path) -> None:
    with pytest.raises(CatalogLoadError, match="not found"):
        load_catalog(snapshot=tmp_path / "missing.json")


def test_load_catalog_corrupt_snapshot(tmp_path) -> None:
    snapshot = tmp_path / "items.json"
    snapshot.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="Invalid JSON"):
        load_catalog(snapshot=snapshot)


def test_load_catalog_uses_client_without_snapshot() -> None:
    with _client(lambda request: httpx.Response(200, json=[{"id": 1, "name": "A"}])) as client:
        assert load_catalog(url=URL, snapshot=None, client=client) == [Item(1, "A")]
