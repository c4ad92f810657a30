"""Shared geometry constants used by the main window widgets."""

from PySide6.QtCore import QSize

# Welcome panel ----------------------------------------------------------------

WELCOME_PANEL_WIDTH = 480
"""Maximum width of the welcome card, matching a comfortable form column."""

WELCOME_TOP_MARGIN = 96
"""Vertical offset of the welcome card while no gallery is shown."""

WELCOME_TOP_MARGIN_COMPACT = 24
"""Reduced offset once a search result grid sits underneath the card."""

# Gallery grid -----------------------------------------------------------------

CARD_SIZE = QSize(176, 196)
"""Fixed footprint of a single item card in the grid."""

CARD_SPACING = 12
"""Gap between neighbouring cards."""

CARD_IMAGE_EDGE = 80
"""Largest edge of the item image drawn inside a card."""

# Detail overlay -----------------------------------------------------------------

OVERLAY_CARD_WIDTH = 420
"""Width of the centred detail card."""

OVERLAY_IMAGE_EDGE = 220
"""Largest edge of the image shown in the detail card; assets are scaled to this."""

BACK_BUTTON_SIZE = QSize(96, 34)
"""Hit target for the floating back button."""

__all__ = [
    "BACK_BUTTON_SIZE",
    "CARD_IMAGE_EDGE",
    "CARD_SIZE",
    "CARD_SPACING",
    "OVERLAY_CARD_WIDTH",
    "OVERLAY_IMAGE_EDGE",
    "WELCOME_PANEL_WIDTH",
    "WELCOME_TOP_MARGIN",
    "WELCOME_TOP_MARGIN_COMPACT",
]
