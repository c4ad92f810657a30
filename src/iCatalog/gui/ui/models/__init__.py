"""Expose Qt models used by the GUI."""

from .item_list_model import ItemListModel
from .roles import Roles, role_names

__all__ = ["ItemListModel", "Roles", "role_names"]
