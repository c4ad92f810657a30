"""Helpers for reading catalog snapshots stored as JSON on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import CatalogLoadError


def read_json(path: Path) -> Any:
    """Read JSON from *path* and return the decoded document."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise CatalogLoadError(f"Catalog file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Unable to read catalog file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Invalid JSON data in {path}") from exc
