"""Global keyboard shortcut handling for the main window."""

from __future__ import annotations

from typing import cast

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QApplication

from .session_controller import SessionController


class ShortcutController(QObject):
    """Install a global event filter that routes keyboard shortcuts.

    Escape dismisses the detail overlay; every other key is left alone so the
    search and range fields keep their normal editing behaviour.
    """

    def __init__(self, controller: SessionController, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller = controller

        self._app = QApplication.instance()
        if self._app is not None:
            self._app.installEventFilter(self)

    # ------------------------------------------------------------------
    # Lifecycle
    def shutdown(self) -> None:
        """Remove the global event filter during application shutdown."""

        if self._app is None:
            return
        self._app.removeEventFilter(self)
        self._app = None

    # ------------------------------------------------------------------
    # QObject API
    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if event.type() != QEvent.Type.KeyPress:
            return super().eventFilter(watched, event)

        if self._handle_escape(cast(QKeyEvent, event)):
            return True
        return super().eventFilter(watched, event)

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_escape(self, event: QKeyEvent) -> bool:
        if event.key() != Qt.Key.Key_Escape:
            return False
        if not self._controller.session.overlay.is_open:
            return False
        self._controller.handle_overlay_dismissed()
        event.accept()
        return True


__all__ = ["ShortcutController"]
