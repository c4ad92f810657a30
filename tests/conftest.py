import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Headless runs have no display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from iCatalog.models.item import Item  # noqa: E402


@pytest.fixture
def sample_catalog():
    return [Item(1, "Alpha"), Item(2, "Beta"), Item(12, "Gamma")]


@pytest.fixture
def sequential_catalog():
    return [Item(i, f"Item {i}") for i in range(1, 101)]


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
