"""List model exposing the session's rendered items to Qt views."""

from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtCore import QAbstractListModel, QModelIndex, QPersistentModelIndex, Qt, Signal
from PySide6.QtGui import QImage

from ....core.session import RenderedItem, Session
from .roles import Roles, role_names


class ItemListModel(QAbstractListModel):
    """Mirror :meth:`Session.rendered_items` as list rows.

    Qt's ``canFetchMore``/``fetchMore`` pair is the viewport-exhaustion signal:
    views call it when the user scrolls close to the last row, and the model
    forwards it to the session as a request for the next batch. Rows only
    ever change in three ways: a full reset for a new query, an append when
    the window grows, and a single-row removal when an asset fails.
    """

    rowsRevealed = Signal(list)
    """Emitted with the :class:`RenderedItem` objects appended by ``fetchMore``."""

    def __init__(self, session: Session, parent=None) -> None:  # type: ignore[override]
        super().__init__(parent)
        self._session = session
        self._rows: List[RenderedItem] = []
        self._row_lookup: Dict[int, int] = {}
        self._thumbnails: Dict[int, QImage] = {}
        self._fetch_suppressed = False

    # ------------------------------------------------------------------
    # Qt model implementation
    # ------------------------------------------------------------------
    def rowCount(self, parent: QModelIndex | None = None) -> int:  # type: ignore[override]
        if parent is not None and parent.isValid():
            return 0
        return len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._rows)):
            return None
        item = self._rows[index.row()]
        if role in (Qt.DisplayRole, Roles.NAME):
            return item.name
        if role == Qt.ToolTipRole:
            return f"{item.name} (ID {item.id})"
        if role == Roles.ITEM_ID:
            return item.id
        if role == Roles.ASSET_URL:
            return item.asset_ref
        if role in (Qt.DecorationRole, Roles.THUMBNAIL):
            return self._thumbnails.get(item.id)
        if role == Roles.HAS_THUMBNAIL:
            return item.id in self._thumbnails
        return None

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        return role_names(super().roleNames())

    def canFetchMore(self, parent: QModelIndex | QPersistentModelIndex | None = None) -> bool:  # type: ignore[override]
        if parent is not None and parent.isValid():
            return False
        if self._fetch_suppressed:
            return False
        return self._session.can_extend()

    def fetchMore(self, parent: QModelIndex | QPersistentModelIndex | None = None) -> None:  # type: ignore[override]
        if not self.canFetchMore(parent):
            return
        revealed = self._session.on_viewport_near_end()
        if not revealed:
            return
        start = len(self._rows)
        self.beginInsertRows(QModelIndex(), start, start + len(revealed) - 1)
        self._rows.extend(revealed)
        for offset, item in enumerate(revealed):
            self._row_lookup[item.id] = start + offset
        self.endInsertRows()
        self.rowsRevealed.emit(list(revealed))

    # ------------------------------------------------------------------
    # Session synchronisation
    # ------------------------------------------------------------------
    def reload(self) -> None:
        """Rebuild every row from the session after a query or state change."""
        self.beginResetModel()
        self._rows = self._session.rendered_items()
        self._rebuild_lookup()
        self.endResetModel()

    def remove_item(self, item_id: int) -> bool:
        """Drop the row for *item_id* if it is currently shown."""
        row = self._row_lookup.get(item_id)
        if row is None:
            return False
        self.beginRemoveRows(QModelIndex(), row, row)
        del self._rows[row]
        self._rebuild_lookup()
        self.endRemoveRows()
        return True

    def set_fetch_suppressed(self, suppressed: bool) -> None:
        """Stop answering viewport-exhaustion requests, e.g. under an overlay."""
        self._fetch_suppressed = bool(suppressed)

    # ------------------------------------------------------------------
    # Thumbnails
    # ------------------------------------------------------------------
    def set_thumbnail(self, item_id: int, image: QImage) -> None:
        self._thumbnails[item_id] = image
        row = self._row_lookup.get(item_id)
        if row is None:
            return
        model_index = self.index(row, 0)
        self.dataChanged.emit(
            model_index,
            model_index,
            [Qt.DecorationRole, Roles.THUMBNAIL, Roles.HAS_THUMBNAIL],
        )

    def thumbnail_for(self, item_id: int) -> Optional[QImage]:
        return self._thumbnails.get(item_id)

    def has_thumbnail(self, item_id: int) -> bool:
        return item_id in self._thumbnails

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def item_at(self, row: int) -> Optional[RenderedItem]:
        if not (0 <= row < len(self._rows)):
            return None
        return self._rows[row]

    def row_for(self, item_id: int) -> Optional[int]:
        return self._row_lookup.get(item_id)

    def items(self) -> List[RenderedItem]:
        return list(self._rows)

    def _rebuild_lookup(self) -> None:
        self._row_lookup = {item.id: row for row, item in enumerate(self._rows)}


__all__ = ["ItemListModel"]
