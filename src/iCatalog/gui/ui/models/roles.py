"""Custom item data roles shared by the model, delegate and views."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from PySide6.QtCore import Qt


_USER_ROLE = int(Qt.ItemDataRole.UserRole)


class Roles(IntEnum):
    ITEM_ID = _USER_ROLE + 1
    NAME = _USER_ROLE + 2
    ASSET_URL = _USER_ROLE + 3
    THUMBNAIL = _USER_ROLE + 4
    HAS_THUMBNAIL = _USER_ROLE + 5


def role_names(base: Dict[int, bytes]) -> Dict[int, bytes]:
    """Merge the custom role names into *base* for QML consumers."""

    names = dict(base)
    names.update(
        {
            Roles.ITEM_ID: b"itemId",
            Roles.NAME: b"name",
            Roles.ASSET_URL: b"assetUrl",
            Roles.THUMBNAIL: b"thumbnail",
            Roles.HAS_THUMBNAIL: b"hasThumbnail",
        }
    )
    return names


__all__ = ["Roles", "role_names"]
