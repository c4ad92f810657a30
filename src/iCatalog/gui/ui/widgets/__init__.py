"""Reusable Qt widgets for the iCatalog GUI."""

from .gallery_page import GalleryPageWidget, ItemCardDelegate, ItemGridView
from .item_overlay import ItemOverlay
from .welcome_panel import WelcomePanel

__all__ = [
    "GalleryPageWidget",
    "ItemCardDelegate",
    "ItemGridView",
    "ItemOverlay",
    "WelcomePanel",
]
