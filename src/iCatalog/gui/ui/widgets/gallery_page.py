"""Gallery page embedding the item grid view inside a simple layout.

The grid is a :class:`QListView` in icon mode backed by
:class:`~iCatalog.gui.ui.models.ItemListModel`. Besides Qt's own
bottom-of-list ``fetchMore`` call, the view asks the model for more rows as
soon as the scroll position comes within ``NEAR_END_THRESHOLD_PX`` of the
end, so the next batch is usually in place before the user reaches it.
"""

from __future__ import annotations

from PySide6.QtCore import QModelIndex, QRect, QSize, Qt, Signal
from PySide6.QtGui import QImage, QPainter, QPen
from PySide6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QListView,
    QStyle,
    QStyledItemDelegate,
    QStyleOptionViewItem,
    QVBoxLayout,
    QWidget,
)

from ....config import NEAR_END_THRESHOLD_PX
from ..models.roles import Roles
from ..palette import (
    BORDER_COLOR,
    BORDER_HOVER_COLOR,
    CARD_COLOR,
    FOREGROUND_COLOR,
    MUTED_TEXT_COLOR,
    mono_font,
)
from .main_window_metrics import CARD_IMAGE_EDGE, CARD_SIZE, CARD_SPACING


class ItemCardDelegate(QStyledItemDelegate):
    """Paint an item as a bordered card with its ID tag, image and name."""

    def sizeHint(self, option: QStyleOptionViewItem, index: QModelIndex) -> QSize:  # type: ignore[override]
        return CARD_SIZE

    def paint(self, painter: QPainter, option: QStyleOptionViewItem, index: QModelIndex) -> None:  # type: ignore[override]
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True)

        hovered = bool(option.state & QStyle.StateFlag.State_MouseOver)
        rect = option.rect.adjusted(0, 0, -1, -1)

        painter.fillRect(rect, CARD_COLOR)
        painter.setPen(QPen(BORDER_HOVER_COLOR if hovered else BORDER_COLOR, 1))
        painter.drawRect(rect)
        accent = QRect(rect.left(), rect.top(), rect.width() + 1, 2)
        painter.fillRect(accent, FOREGROUND_COLOR if hovered else BORDER_HOVER_COLOR)

        name_height = 40
        image_area = QRect(rect.left(), rect.top() + 2, rect.width(), rect.height() - name_height - 2)
        image = index.data(Roles.THUMBNAIL)
        if isinstance(image, QImage) and not image.isNull():
            scaled = image.scaled(
                CARD_IMAGE_EDGE,
                CARD_IMAGE_EDGE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            target = QRect(0, 0, scaled.width(), scaled.height())
            target.moveCenter(image_area.center())
            painter.drawImage(target, scaled)

        item_id = index.data(Roles.ITEM_ID)
        painter.setFont(mono_font(7))
        painter.setPen(MUTED_TEXT_COLOR)
        tag_rect = QRect(rect.right() - 64, rect.top() + 10, 56, 16)
        painter.drawText(tag_rect, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter, str(item_id))

        name_rect = QRect(rect.left() + 8, rect.bottom() - name_height, rect.width() - 16, name_height)
        painter.setPen(BORDER_COLOR)
        painter.drawLine(rect.left(), name_rect.top(), rect.right(), name_rect.top())
        painter.setPen(FOREGROUND_COLOR if hovered else MUTED_TEXT_COLOR)
        painter.setFont(mono_font(8))
        painter.drawText(
            name_rect,
            int(Qt.AlignmentFlag.AlignCenter) | int(Qt.TextFlag.TextWordWrap),
            str(index.data(Roles.NAME) or ""),
        )
        painter.restore()


class ItemGridView(QListView):
    """Icon-mode list view that reports activations by item ID."""

    itemActivated = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setViewMode(QListView.ViewMode.IconMode)
        self.setResizeMode(QListView.ResizeMode.Adjust)
        self.setMovement(QListView.Movement.Static)
        self.setUniformItemSizes(True)
        self.setSpacing(CARD_SPACING // 2)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setMouseTracking(True)
        self.setItemDelegate(ItemCardDelegate(self))

        self.clicked.connect(self._handle_clicked)
        self.verticalScrollBar().valueChanged.connect(self._check_near_end)

    def is_near_end(self) -> bool:
        bar = self.verticalScrollBar()
        return bar.maximum() - bar.value() <= NEAR_END_THRESHOLD_PX

    def _check_near_end(self, _value: int = 0) -> None:
        model = self.model()
        if model is None or not self.is_near_end():
            return
        if model.canFetchMore(QModelIndex()):
            model.fetchMore(QModelIndex())

    def _handle_clicked(self, index: QModelIndex) -> None:
        item_id = index.data(Roles.ITEM_ID)
        if item_id is None:
            return
        self.itemActivated.emit(int(item_id))


class GalleryPageWidget(QWidget):
    """Thin wrapper that exposes the item grid view as a self-contained page."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("galleryPage")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.grid_view = ItemGridView(self)
        self.grid_view.setObjectName("galleryGridView")
        layout.addWidget(self.grid_view)


__all__ = ["GalleryPageWidget", "ItemCardDelegate", "ItemGridView"]
