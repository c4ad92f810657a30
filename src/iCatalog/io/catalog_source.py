"""One-shot catalog retrieval from the remote table endpoint or a local snapshot."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import httpx

from ..config import CATALOG_FILE, CATALOG_URL, HTTP_TIMEOUT_SECONDS
from ..errors import CatalogLoadError
from ..models.item import Item, parse_catalog_payload
from ..utils.jsonio import read_json

logger = logging.getLogger(__name__)


def fetch_catalog(
    client: httpx.Client,
    url: str = CATALOG_URL,
    *,
    timeout: float = HTTP_TIMEOUT_SECONDS,
) -> List[Item]:
    """Download the full catalog using *client*.

    Any transport problem, HTTP error status or unusable payload is reported
    as :class:`CatalogLoadError`. There is no retry.
    """

    try:
        response = client.get(url, timeout=timeout)
    except httpx.TimeoutException as exc:
        raise CatalogLoadError(f"Timeout fetching catalog: {url[:100]}") from exc
    except httpx.RequestError as exc:
        raise CatalogLoadError(
            f"Network error fetching catalog: {url[:100]}: {type(exc).__name__}"
        ) from exc

    if response.status_code >= 400:
        raise CatalogLoadError(f"HTTP {response.status_code} fetching catalog: {url[:100]}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise CatalogLoadError(f"Catalog response is not valid JSON: {url[:100]}") from exc

    items = parse_catalog_payload(payload)
    logger.info("Fetched %d catalog items from %s", len(items), url[:100])
    return items


def load_catalog(
    *,
    url: str = CATALOG_URL,
    snapshot: Optional[Path] = CATALOG_FILE,
    client: Optional[httpx.Client] = None,
) -> List[Item]:
    """Load the catalog from *snapshot* when given, otherwise from *url*."""

    if snapshot is not None:
        items = parse_catalog_payload(read_json(snapshot))
        logger.info("Loaded %d catalog items from %s", len(items), snapshot)
        return items

    if client is not None:
        return fetch_catalog(client, url)
    with httpx.Client(follow_redirects=True) as owned:
        return fetch_catalog(owned, url)


__all__ = ["fetch_catalog", "load_catalog"]
