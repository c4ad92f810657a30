"""Background worker helpers for GUI tasks."""

from .asset_loader_worker import AssetLoaderSignals, AssetLoaderWorker
from .catalog_loader_worker import CatalogLoaderSignals, CatalogLoaderWorker

__all__ = [
    "AssetLoaderSignals",
    "AssetLoaderWorker",
    "CatalogLoaderSignals",
    "CatalogLoaderWorker",
]
