"""Remote catalog and asset access."""

from .asset_fetcher import fetch_asset_image
from .catalog_source import fetch_catalog, load_catalog

__all__ = ["fetch_asset_image", "fetch_catalog", "load_catalog"]
