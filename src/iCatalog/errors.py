"""Exception hierarchy shared across the catalog browser."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every error raised by iCatalog."""


class CatalogLoadError(CatalogError):
    """The catalog could not be fetched or its payload was unusable."""


class AssetLoadError(CatalogError):
    """The visual asset for a single item failed to download or decode."""

    def __init__(self, item_id: int, message: str) -> None:
        super().__init__(message)
        self.item_id = item_id


__all__ = ["AssetLoadError", "CatalogError", "CatalogLoadError"]
