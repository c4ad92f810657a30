from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from PySide6.QtCore import QThreadPool

from iCatalog.core.session import Session
from iCatalog.gui.ui.controllers.session_controller import SessionController
from iCatalog.gui.ui.main_window import MainWindow
from iCatalog.gui.ui.models.item_list_model import ItemListModel


@pytest.fixture
def window(qapp, sequential_catalog):
    with patch.object(QThreadPool, "globalInstance"):
        session = Session(batch_size=10, asset_base="https://cdn.test/")
        controller = SessionController(session, ItemListModel(session), client=MagicMock())
        window = MainWindow(controller)
        window.controller = controller
        yield window
        window.close()


def test_welcome_layout_while_loading(window) -> None:
    panel = window.welcome_panel
    assert not panel.isHidden()
    assert window.gallery_page.isHidden()
    assert window.back_button.isHidden()
    assert panel.status_label.text() == "SYNC"
    assert panel.open_button.text() == "LOADING..."
    assert not panel.open_button.isEnabled()


def test_ready_catalog_enables_range(window, sequential_catalog) -> None:
    window.controller._on_catalog_loaded(0, sequential_catalog)
    panel = window.welcome_panel
    assert panel.status_label.text() == "ONLINE"
    assert panel.open_button.text() == "OPEN"
    assert panel.open_button.isEnabled()


def test_failed_catalog_shows_connection_error(window) -> None:
    window.controller._on_catalog_failed(0, "offline")
    panel = window.welcome_panel
    assert panel.status_label.text() == "OFFLINE"
    assert panel.open_button.text() == "CONNECTION ERROR"
    assert not panel.open_button.isEnabled()


def test_search_compacts_welcome_and_shows_gallery(window, sequential_catalog) -> None:
    window.controller._on_catalog_loaded(0, sequential_catalog)
    window.welcome_panel.search_field.setText("item 1")

    assert window.welcome_panel.is_compact()
    assert not window.gallery_page.isHidden()
    assert window.controller.model.rowCount() == 10

    window.welcome_panel.search_field.setText("")
    assert not window.welcome_panel.is_compact()
    assert window.gallery_page.isHidden()


def test_range_submit_hides_welcome_and_back_returns(window, sequential_catalog) -> None:
    window.controller._on_catalog_loaded(0, sequential_catalog)
    panel = window.welcome_panel
    panel.low_field.setText("5")
    panel.high_field.setText("30")
    panel.open_button.click()

    assert panel.isHidden()
    assert not window.back_button.isHidden()
    assert window.controller.model.rowCount() == 10

    window.back_button.click()
    assert not panel.isHidden()
    assert window.gallery_page.isHidden()
    assert window.controller.model.rowCount() == 0


def test_activation_opens_overlay_and_dismiss_closes(window, sequential_catalog) -> None:
    window.controller._on_catalog_loaded(0, sequential_catalog)
    window.welcome_panel.low_field.setText("1")
    window.welcome_panel.high_field.setText("10")
    window.welcome_panel.open_button.click()

    window.gallery_page.grid_view.itemActivated.emit(4)
    assert window.overlay.content().id == 4
    assert window.overlay.name_label.text() == "Item 4"

    window.overlay.close_button.click()
    assert window.overlay.content() is None
    assert window.overlay.isHidden()
