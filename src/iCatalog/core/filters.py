"""Query types and the in-memory filter engine.

A query is evaluated against the full catalog in one pass and the matching
items are returned in catalog order. Nothing is cached between queries; every
evaluation starts from scratch.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Sequence, Union

from ..models.item import Item

_DECIMAL = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"

# Mirrors what a browser ``Number(term)`` accepts once the term is lowercased.
_NUMERIC_TERM = re.compile(
    rf"""
    ^(?:
        {_DECIMAL}
      | 0x[0-9a-f]+
      | 0o[0-7]+
      | 0b[01]+
    )$
    """,
    re.VERBOSE | re.ASCII,
)
_DECIMAL_BOUND = re.compile(rf"^{_DECIMAL}$", re.ASCII)


@dataclass(frozen=True)
class TextQuery:
    """Substring search on the decimal ID text or on the item name."""

    term: str

    @property
    def is_numeric(self) -> bool:
        return looks_numeric(self.term)


@dataclass(frozen=True)
class RangeQuery:
    """Inclusive ``low <= id <= high`` filter."""

    low: float
    high: float


@dataclass(frozen=True)
class NoQuery:
    """No search term and no submitted range."""


Query = Union[TextQuery, RangeQuery, NoQuery]


def looks_numeric(term: str) -> bool:
    """Return ``True`` when *term* reads as a number rather than a name."""

    return bool(_NUMERIC_TERM.match(term))


def normalize_term(text: str) -> str:
    return text.strip().lower()


def text_query_for(text: str) -> Query:
    """Build the query for raw search-field *text*; blank text yields :class:`NoQuery`."""

    term = normalize_term(text)
    if not term:
        return NoQuery()
    return TextQuery(term)


def coerce_bound(text: Union[str, int, float]) -> float:
    """Coerce a range input to a number.

    Blank input counts as ``0`` and anything non-numeric becomes NaN, which
    no ``id`` compares against, so the range simply matches nothing.
    """

    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return text
    stripped = str(text).strip()
    if not stripped:
        return 0
    if not _DECIMAL_BOUND.match(stripped):
        return math.nan
    value = float(stripped)
    return int(value) if value.is_integer() else value


def _match_text(items: Sequence[Item], term: str) -> List[Item]:
    if looks_numeric(term):
        return [item for item in items if term in item.id_text]
    return [item for item in items if item.name and term in item.name.lower()]


def _match_range(items: Sequence[Item], low: float, high: float) -> List[Item]:
    return [item for item in items if low <= item.id <= high]


def evaluate(items: Sequence[Item], query: Query) -> List[Item]:
    """Return the items of *items* matching *query*, in their original order."""

    if isinstance(query, TextQuery):
        return _match_text(items, query.term)
    if isinstance(query, RangeQuery):
        return _match_range(items, query.low, query.high)
    return []


__all__ = [
    "NoQuery",
    "Query",
    "RangeQuery",
    "TextQuery",
    "coerce_bound",
    "evaluate",
    "looks_numeric",
    "normalize_term",
    "text_query_for",
]
