"""Shared colour utilities and constants for the Qt GUI layer."""

from __future__ import annotations

from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication

# --- Surface colours ----------------------------------------------------------
# Near-black canvas with slightly lifted cards, echoing a terminal look.
BACKGROUND_COLOR_HEX = "#0a0a0a"
CARD_COLOR_HEX = "#121212"
BORDER_COLOR_HEX = "#262626"
BORDER_HOVER_COLOR_HEX = "#5c5c5c"

FOREGROUND_COLOR_HEX = "#fafafa"
MUTED_TEXT_COLOR_HEX = "#8a8a8a"
DESTRUCTIVE_COLOR_HEX = "#e5484d"

BACKGROUND_COLOR = QColor(BACKGROUND_COLOR_HEX)
CARD_COLOR = QColor(CARD_COLOR_HEX)
BORDER_COLOR = QColor(BORDER_COLOR_HEX)
BORDER_HOVER_COLOR = QColor(BORDER_HOVER_COLOR_HEX)
FOREGROUND_COLOR = QColor(FOREGROUND_COLOR_HEX)
MUTED_TEXT_COLOR = QColor(MUTED_TEXT_COLOR_HEX)

# Dimmed backdrop drawn behind the detail overlay.
OVERLAY_BACKDROP_COLOR = QColor(0, 0, 0, 230)

# --- Status badge ---------------------------------------------------------------
STATUS_ONLINE_COLOR_HEX = "#7f7f7f"
STATUS_SYNC_COLOR_HEX = MUTED_TEXT_COLOR_HEX
STATUS_OFFLINE_COLOR_HEX = DESTRUCTIVE_COLOR_HEX

MONO_FONT_FAMILY = "monospace"


def mono_font(point_size: int, *, bold: bool = False) -> QFont:
    """Return the monospace font used for IDs, labels and inputs."""

    font = QFont(MONO_FONT_FAMILY)
    font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPointSize(point_size)
    if bold:
        font.setWeight(QFont.Weight.DemiBold)
    return font


def apply_dark_palette(app: QApplication) -> None:
    """Install the dark application palette so native widgets match the cards."""

    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, BACKGROUND_COLOR)
    palette.setColor(QPalette.ColorRole.WindowText, FOREGROUND_COLOR)
    palette.setColor(QPalette.ColorRole.Base, BACKGROUND_COLOR)
    palette.setColor(QPalette.ColorRole.AlternateBase, CARD_COLOR)
    palette.setColor(QPalette.ColorRole.Text, FOREGROUND_COLOR)
    palette.setColor(QPalette.ColorRole.Button, CARD_COLOR)
    palette.setColor(QPalette.ColorRole.ButtonText, FOREGROUND_COLOR)
    palette.setColor(QPalette.ColorRole.Highlight, BORDER_HOVER_COLOR)
    palette.setColor(QPalette.ColorRole.HighlightedText, FOREGROUND_COLOR)
    palette.setColor(QPalette.ColorRole.PlaceholderText, MUTED_TEXT_COLOR)
    palette.setColor(QPalette.ColorRole.ToolTipBase, CARD_COLOR)
    palette.setColor(QPalette.ColorRole.ToolTipText, FOREGROUND_COLOR)
    app.setPalette(palette)
