"""Download and decode a single item asset."""

from __future__ import annotations

import io

import httpx
from PIL import Image

from ..config import HTTP_TIMEOUT_SECONDS
from ..errors import AssetLoadError


def fetch_asset_image(
    client: httpx.Client,
    item_id: int,
    url: str,
    *,
    timeout: float = HTTP_TIMEOUT_SECONDS,
) -> Image.Image:
    """Fetch and validate the asset for *item_id* located at *url*.

    The image is fully decoded and converted to RGBA so truncated or
    non-image responses surface here as :class:`AssetLoadError` rather than
    later in the view.
    """

    try:
        response = client.get(url, timeout=timeout)
    except httpx.TimeoutException as exc:
        raise AssetLoadError(item_id, f"Timeout downloading asset: {url[:100]}") from exc
    except httpx.RequestError as exc:
        raise AssetLoadError(
            item_id, f"Network error downloading asset: {url[:100]}: {type(exc).__name__}"
        ) from exc

    if response.status_code >= 400:
        raise AssetLoadError(item_id, f"HTTP {response.status_code} downloading asset: {url[:100]}")

    content_type = response.headers.get("content-type", "")
    if content_type and not content_type.startswith("image/"):
        raise AssetLoadError(item_id, f"Expected image content-type, got: {content_type}")

    try:
        img = Image.open(io.BytesIO(response.content))
        img.load()  # Force full decode to catch truncation
    except Exception as exc:
        raise AssetLoadError(item_id, f"Downloaded asset is corrupt: {url[:100]}") from exc
    return img.convert("RGBA")


__all__ = ["fetch_asset_image"]
