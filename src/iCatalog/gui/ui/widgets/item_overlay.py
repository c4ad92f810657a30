"""Full-window overlay showing a single item in detail."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtGui import QImage, QMouseEvent, QPainter, QPaintEvent, QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ....core.overlay import OverlayContent
from ..palette import (
    BORDER_COLOR_HEX,
    CARD_COLOR_HEX,
    FOREGROUND_COLOR_HEX,
    MUTED_TEXT_COLOR_HEX,
    OVERLAY_BACKDROP_COLOR,
    mono_font,
)
from .main_window_metrics import OVERLAY_CARD_WIDTH, OVERLAY_IMAGE_EDGE


class ItemOverlay(QWidget):
    """Dimmed backdrop with a centred detail card.

    Clicking the backdrop or the close button emits :attr:`dismissRequested`;
    the window decides whether the overlay actually closes.
    """

    dismissRequested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("itemOverlay")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, False)
        self._content: Optional[OverlayContent] = None

        outer = QVBoxLayout(self)
        outer.setContentsMargins(24, 24, 24, 24)
        outer.addStretch(1)

        self._card = QFrame(self)
        self._card.setObjectName("overlayCard")
        self._card.setFixedWidth(OVERLAY_CARD_WIDTH)
        self._card.setStyleSheet(
            f"""
            #overlayCard {{
                background-color: {CARD_COLOR_HEX};
                border: 1px solid {BORDER_COLOR_HEX};
                border-top: 2px solid {FOREGROUND_COLOR_HEX};
            }}
            QLabel#overlayMuted {{ color: {MUTED_TEXT_COLOR_HEX}; }}
            QPushButton#overlayClose {{
                background: transparent;
                border: none;
                color: {MUTED_TEXT_COLOR_HEX};
            }}
            """
        )
        # Clicks on the card must not reach the backdrop.
        self._card.installEventFilter(self)

        card_layout = QVBoxLayout(self._card)
        card_layout.setContentsMargins(0, 0, 0, 0)
        card_layout.setSpacing(0)

        header = QHBoxLayout()
        header.setContentsMargins(20, 10, 12, 10)
        self.header_label = QLabel(self._card)
        self.header_label.setObjectName("overlayMuted")
        self.header_label.setFont(mono_font(8))
        header.addWidget(self.header_label)
        header.addStretch(1)
        self.close_button = QPushButton("✕", self._card)
        self.close_button.setObjectName("overlayClose")
        self.close_button.setFixedSize(28, 28)
        self.close_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.close_button.clicked.connect(self.dismissRequested)
        header.addWidget(self.close_button)
        card_layout.addLayout(header)

        self.image_label = QLabel(self._card)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setMinimumHeight(OVERLAY_IMAGE_EDGE + 48)
        card_layout.addWidget(self.image_label)

        info = QVBoxLayout()
        info.setContentsMargins(20, 14, 20, 16)
        info.setSpacing(6)
        self.name_label = QLabel(self._card)
        self.name_label.setWordWrap(True)
        name_font = self.name_label.font()
        name_font.setPointSize(14)
        name_font.setBold(True)
        self.name_label.setFont(name_font)
        self.id_label = QLabel(self._card)
        self.id_label.setObjectName("overlayMuted")
        self.id_label.setFont(mono_font(8))
        info.addWidget(self.name_label)
        info.addWidget(self.id_label)
        card_layout.addLayout(info)

        row = QHBoxLayout()
        row.addStretch(1)
        row.addWidget(self._card)
        row.addStretch(1)
        outer.addLayout(row)
        outer.addStretch(1)

        self.hide()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def show_content(self, content: Optional[OverlayContent], image: Optional[QImage]) -> None:
        """Display *content*, or hide the overlay when it is ``None``."""

        self._content = content
        if content is None:
            self.image_label.clear()
            self.hide()
            return

        self.header_label.setText(f"ITEM_{content.id}")
        self.name_label.setText(content.name)
        self.id_label.setText(f"ID: {content.id}")
        self.set_image(image)
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())
        self.show()
        self.raise_()

    def set_image(self, image: Optional[QImage]) -> None:
        if image is None or image.isNull():
            self.image_label.clear()
            return
        pixmap = QPixmap.fromImage(image).scaled(
            OVERLAY_IMAGE_EDGE,
            OVERLAY_IMAGE_EDGE,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.image_label.setPixmap(pixmap)

    def content(self) -> Optional[OverlayContent]:
        return self._content

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------
    def paintEvent(self, event: QPaintEvent) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.fillRect(self.rect(), OVERLAY_BACKDROP_COLOR)
        painter.end()
        super().paintEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if not self._card.geometry().contains(event.position().toPoint()):
            self.dismissRequested.emit()
            event.accept()
            return
        super().mousePressEvent(event)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if watched is self._card and event.type() == QEvent.Type.MouseButtonPress:
            event.accept()
            return True
        return super().eventFilter(watched, event)


__all__ = ["ItemOverlay"]
