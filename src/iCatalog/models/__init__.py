"""Plain data records used by the core."""

from .item import Item, asset_url, parse_catalog_payload

__all__ = ["Item", "asset_url", "parse_catalog_payload"]
