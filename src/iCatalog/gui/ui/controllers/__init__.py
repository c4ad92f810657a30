"""Controllers coordinating widgets with the browsing session."""

from .session_controller import SessionController
from .shortcut_controller import ShortcutController

__all__ = ["SessionController", "ShortcutController"]
