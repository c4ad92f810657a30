"""Single-slot detail overlay state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OverlayContent:
    id: int
    name: str
    asset_ref: str


class DetailOverlay:
    """Hold at most one open item; opening another replaces it."""

    def __init__(self) -> None:
        self._content: Optional[OverlayContent] = None

    @property
    def content(self) -> Optional[OverlayContent]:
        return self._content

    @property
    def is_open(self) -> bool:
        return self._content is not None

    def open(self, content: OverlayContent) -> None:
        self._content = content

    def close(self) -> bool:
        """Close the overlay and return whether anything was open."""
        was_open = self._content is not None
        self._content = None
        return was_open


__all__ = ["DetailOverlay", "OverlayContent"]
