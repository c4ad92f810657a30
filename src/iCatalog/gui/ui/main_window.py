"""Top-level window composing the welcome panel, gallery and detail overlay."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QResizeEvent
from PySide6.QtWidgets import QMainWindow, QPushButton, QVBoxLayout, QWidget

from ...config import APP_TITLE
from ...core.session import SessionPhase, SessionView
from .controllers.session_controller import SessionController
from .controllers.shortcut_controller import ShortcutController
from .palette import BORDER_COLOR_HEX, CARD_COLOR_HEX, FOREGROUND_COLOR_HEX, mono_font
from .widgets.gallery_page import GalleryPageWidget
from .widgets.item_overlay import ItemOverlay
from .widgets.main_window_metrics import (
    BACK_BUTTON_SIZE,
    WELCOME_TOP_MARGIN,
    WELCOME_TOP_MARGIN_COMPACT,
)
from .widgets.welcome_panel import WelcomePanel


class MainWindow(QMainWindow):
    """Render :class:`SessionView` snapshots and forward user input to the controller."""

    def __init__(self, controller: SessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self.setWindowTitle(APP_TITLE)
        self.resize(1280, 860)

        central = QWidget(self)
        self.setCentralWidget(central)
        self._layout = QVBoxLayout(central)
        self._layout.setContentsMargins(24, WELCOME_TOP_MARGIN, 24, 0)
        self._layout.setSpacing(16)

        self.back_button = QPushButton("←  BACK", central)
        self.back_button.setObjectName("backButton")
        self.back_button.setFont(mono_font(9))
        self.back_button.setFixedSize(BACK_BUTTON_SIZE)
        self.back_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.back_button.setStyleSheet(
            f"#backButton {{ background-color: {CARD_COLOR_HEX};"
            f" border: 1px solid {BORDER_COLOR_HEX}; color: {FOREGROUND_COLOR_HEX}; }}"
        )
        self._layout.addWidget(self.back_button, 0, Qt.AlignmentFlag.AlignLeft)

        self.welcome_panel = WelcomePanel(central)
        self._layout.addWidget(self.welcome_panel, 0, Qt.AlignmentFlag.AlignHCenter)

        self.gallery_page = GalleryPageWidget(central)
        self.gallery_page.grid_view.setModel(controller.model)
        self._layout.addWidget(self.gallery_page, 1)

        self.overlay = ItemOverlay(central)

        self.welcome_panel.searchTextChanged.connect(controller.handle_query_text_changed)
        self.welcome_panel.rangeSubmitted.connect(controller.handle_range_submit)
        self.back_button.clicked.connect(controller.handle_back_requested)
        self.gallery_page.grid_view.itemActivated.connect(controller.handle_item_activated)
        self.overlay.dismissRequested.connect(controller.handle_overlay_dismissed)
        controller.viewChanged.connect(self.apply_view)

        self._shortcuts = ShortcutController(controller, self)
        self.apply_view(controller.current_view())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def apply_view(self, view: SessionView) -> None:
        """Show or hide each region according to *view*."""

        self.welcome_panel.apply_view(view)
        if view.phase is SessionPhase.WELCOME and self.welcome_panel.search_field.text().strip():
            # The back action discards the query, so the field must not keep it.
            self.welcome_panel.reset_search()

        self.back_button.setVisible(view.phase is not SessionPhase.WELCOME)
        self.gallery_page.setVisible(view.gallery_visible)
        top = WELCOME_TOP_MARGIN_COMPACT if view.gallery_visible else WELCOME_TOP_MARGIN
        self._layout.setContentsMargins(24, top, 24, 0)

        content = view.overlay
        image = None
        if content is not None:
            image = self._controller.model.thumbnail_for(content.id)
        self.overlay.show_content(content, image)

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------
    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if self.overlay.isVisible():
            self.overlay.setGeometry(self.centralWidget().rect())

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self._shortcuts.shutdown()
        self._controller.shutdown()
        super().closeEvent(event)


__all__ = ["MainWindow"]
