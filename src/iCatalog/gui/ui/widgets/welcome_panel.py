"""Welcome card holding the search field, the ID range form and the load status."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from ....config import APP_TITLE, DEFAULT_RANGE
from ....core.catalog import CatalogStatus
from ....core.session import SessionView
from ..palette import (
    BORDER_COLOR_HEX,
    CARD_COLOR_HEX,
    FOREGROUND_COLOR_HEX,
    MUTED_TEXT_COLOR_HEX,
    STATUS_OFFLINE_COLOR_HEX,
    STATUS_ONLINE_COLOR_HEX,
    STATUS_SYNC_COLOR_HEX,
    mono_font,
)
from .main_window_metrics import WELCOME_PANEL_WIDTH

_STATUS_TEXT = {
    CatalogStatus.LOADING: ("SYNC", STATUS_SYNC_COLOR_HEX),
    CatalogStatus.READY: ("ONLINE", STATUS_ONLINE_COLOR_HEX),
    CatalogStatus.ERROR: ("OFFLINE", STATUS_OFFLINE_COLOR_HEX),
}

_OPEN_BUTTON_TEXT = {
    CatalogStatus.LOADING: "LOADING...",
    CatalogStatus.READY: "OPEN",
    CatalogStatus.ERROR: "CONNECTION ERROR",
}


class WelcomePanel(QFrame):
    """Entry form shown while no range gallery is open.

    The panel only reports what the user typed; whether a change actually
    starts a search or a range browse is decided by the session.
    """

    searchTextChanged = Signal(str)
    rangeSubmitted = Signal(str, str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("welcomePanel")
        self.setMaximumWidth(WELCOME_PANEL_WIDTH)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Maximum)
        self.setStyleSheet(
            f"""
            #welcomePanel {{
                background-color: {CARD_COLOR_HEX};
                border: 1px solid {BORDER_COLOR_HEX};
                border-top: 2px solid {FOREGROUND_COLOR_HEX};
            }}
            QLineEdit {{
                background-color: transparent;
                border: 1px solid {BORDER_COLOR_HEX};
                padding: 8px 10px;
                color: {FOREGROUND_COLOR_HEX};
            }}
            QLabel#sectionLabel, QLabel#footerLabel {{
                color: {MUTED_TEXT_COLOR_HEX};
            }}
            QPushButton#openButton {{
                background-color: {FOREGROUND_COLOR_HEX};
                color: {CARD_COLOR_HEX};
                border: none;
                padding: 12px;
                font-weight: 600;
            }}
            QPushButton#openButton:disabled {{
                background-color: {BORDER_COLOR_HEX};
                color: {MUTED_TEXT_COLOR_HEX};
            }}
            """
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addWidget(self._build_header())

        body = QWidget(self)
        self._body_layout = QVBoxLayout(body)
        self._body_layout.setContentsMargins(28, 24, 28, 24)
        self._body_layout.setSpacing(14)

        title = QLabel(APP_TITLE.upper(), body)
        title_font = title.font()
        title_font.setPointSize(24)
        title_font.setBold(True)
        title.setFont(title_font)
        self._body_layout.addWidget(title)

        self.search_field = QLineEdit(body)
        self.search_field.setObjectName("searchField")
        self.search_field.setPlaceholderText("Search by name or ID...")
        self.search_field.setFont(mono_font(10))
        self.search_field.setClearButtonEnabled(True)
        self.search_field.textChanged.connect(self.searchTextChanged)
        self._body_layout.addWidget(self.search_field)

        self._range_section = self._build_range_section(body)
        self._body_layout.addWidget(self._range_section)
        layout.addWidget(body)

        footer = QLabel("v2.0", self)
        footer.setObjectName("footerLabel")
        footer.setFont(mono_font(7))
        footer.setAlignment(Qt.AlignmentFlag.AlignRight)
        footer.setContentsMargins(16, 6, 16, 6)
        layout.addWidget(footer)

        self._compact = False

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    def _build_header(self) -> QWidget:
        header = QWidget(self)
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(16, 10, 16, 10)

        caption = QLabel(APP_TITLE.upper(), header)
        caption.setObjectName("sectionLabel")
        caption.setFont(mono_font(8))
        header_layout.addWidget(caption)
        header_layout.addStretch(1)

        self.status_label = QLabel(header)
        self.status_label.setObjectName("statusLabel")
        self.status_label.setFont(mono_font(8))
        header_layout.addWidget(self.status_label)
        return header

    def _build_range_section(self, parent: QWidget) -> QWidget:
        section = QWidget(parent)
        section_layout = QVBoxLayout(section)
        section_layout.setContentsMargins(0, 6, 0, 0)
        section_layout.setSpacing(10)

        divider = QLabel("ID RANGE", section)
        divider.setObjectName("sectionLabel")
        divider.setFont(mono_font(8))
        divider.setAlignment(Qt.AlignmentFlag.AlignCenter)
        section_layout.addWidget(divider)

        inputs = QHBoxLayout()
        inputs.setSpacing(12)
        low, high = DEFAULT_RANGE
        self.low_field = self._build_bound_field(section, "From", str(low), inputs)
        self.high_field = self._build_bound_field(section, "To", str(high), inputs)
        section_layout.addLayout(inputs)

        self.open_button = QPushButton(section)
        self.open_button.setObjectName("openButton")
        self.open_button.setFont(mono_font(10, bold=True))
        self.open_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.open_button.clicked.connect(self._emit_range)
        section_layout.addWidget(self.open_button)

        self.low_field.returnPressed.connect(self._emit_range)
        self.high_field.returnPressed.connect(self._emit_range)
        return section

    def _build_bound_field(
        self, parent: QWidget, caption: str, value: str, row: QHBoxLayout
    ) -> QLineEdit:
        column = QVBoxLayout()
        column.setSpacing(4)
        label = QLabel(caption.upper(), parent)
        label.setObjectName("sectionLabel")
        label.setFont(mono_font(7))
        field = QLineEdit(value, parent)
        field.setFont(mono_font(10))
        column.addWidget(label)
        column.addWidget(field)
        row.addLayout(column, 1)
        return field

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    def apply_view(self, view: SessionView) -> None:
        """Synchronise visibility, compaction and the status badge with *view*."""

        self.setVisible(view.welcome_visible)
        self.set_compact(view.welcome_compact)

        status_text, status_color = _STATUS_TEXT[view.status]
        self.status_label.setText(status_text)
        self.status_label.setStyleSheet(f"color: {status_color};")

        self.open_button.setText(_OPEN_BUTTON_TEXT[view.status])
        self.open_button.setEnabled(view.range_enabled)

    def set_compact(self, compact: bool) -> None:
        """Hide the range form while search results are shown below the card."""

        if compact == self._compact:
            return
        self._compact = compact
        self._range_section.setVisible(not compact)

    def is_compact(self) -> bool:
        return self._compact

    def reset_search(self) -> None:
        """Clear the search field without reporting the change."""

        blocked = self.search_field.blockSignals(True)
        self.search_field.clear()
        self.search_field.blockSignals(blocked)

    def _emit_range(self) -> None:
        if not self.open_button.isEnabled():
            return
        self.rangeSubmitted.emit(self.low_field.text(), self.high_field.text())


__all__ = ["WelcomePanel"]
