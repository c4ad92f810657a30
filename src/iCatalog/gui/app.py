"""Application bootstrap for the catalog browser."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from ..config import APP_TITLE
from ..core.session import Session
from ..utils.logging import get_logger
from .ui.controllers.session_controller import SessionController
from .ui.main_window import MainWindow
from .ui.models.item_list_model import ItemListModel
from .ui.palette import apply_dark_palette


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the Qt event loop and return its exit code."""

    logger = get_logger()
    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationName(APP_TITLE)
    apply_dark_palette(app)

    session = Session()
    model = ItemListModel(session)
    controller = SessionController(session, model)
    window = MainWindow(controller)
    window.show()

    logger.info("Loading catalog")
    controller.start()
    return app.exec()


__all__ = ["main"]
