from __future__ import annotations

import io

import httpx
import pytest
from PIL import Image

from iCatalog.errors import AssetLoadError
from iCatalog.io.asset_fetcher import fetch_asset_image

URL = "https://cdn.test/5.webp"


def _png_bytes(size=(8, 6)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, (200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_fetch_asset_image_decodes_to_rgba() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=_png_bytes(), headers={"content-type": "image/png"})

    with _client(handler) as client:
        image = fetch_asset_image(client, 5, URL)

    assert image.mode == "RGBA"
    assert image.size == (8, 6)


def test_missing_asset_raises_with_item_id() -> None:
    with _client(lambda request: httpx.Response(404)) as client:
        with pytest.raises(AssetLoadError) as excinfo:
            fetch_asset_image(client, 5, URL)
    assert excinfo.value.item_id == 5
    assert "HTTP 404" in str(excinfo.value)


def test_non_image_content_type_is_rejected() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>", headers={"content-type": "text/html"})

    with _client(handler) as client:
        with pytest.raises(AssetLoadError, match="content-type"):
            fetch_asset_image(client, 5, URL)


def test_corrupt_image_is_rejected() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"\x00garbage", headers={"content-type": "image/webp"})

    with _client(handler) as client:
        with pytest.raises(AssetLoadError, match="corrupt"):
            fetch_asset_image(client, 5, URL)


def test_network_error_is_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with _client(handler) as client:
        with pytest.raises(AssetLoadError, match="Network error"):
            fetch_asset_image(client, 5, URL)
