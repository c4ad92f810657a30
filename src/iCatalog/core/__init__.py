"""Query, pagination and session logic with no GUI dependencies."""

from .catalog import Catalog, CatalogStatus
from .failure_mask import FailureMask
from .filters import NoQuery, RangeQuery, TextQuery, evaluate
from .overlay import DetailOverlay, OverlayContent
from .pagination import PaginationController
from .session import RenderedItem, Session, SessionPhase, SessionView

__all__ = [
    "Catalog",
    "CatalogStatus",
    "DetailOverlay",
    "FailureMask",
    "NoQuery",
    "OverlayContent",
    "PaginationController",
    "RangeQuery",
    "RenderedItem",
    "Session",
    "SessionPhase",
    "SessionView",
    "TextQuery",
    "evaluate",
]
