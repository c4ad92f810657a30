"""Application-wide constants and environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Pagination -----------------------------------------------------------------

BATCH_SIZE = 40
"""Number of items revealed per viewport-exhaustion signal."""

NEAR_END_THRESHOLD_PX = 800
"""Distance from the bottom of the grid that counts as "near the end"."""

# Remote sources -------------------------------------------------------------

_DEFAULT_CATALOG_URL = (
    "https://server-api.arizona.games/client/json/table/get"
    "?project=arizona&server=0&key=inventory_items"
)
_DEFAULT_ASSET_BASE_URL = (
    "https://reserve-cdn.azresources.cloud/projects/arizona-rp/assets/images/donate/"
)

CATALOG_URL = os.environ.get("ICATALOG_CATALOG_URL", "") or _DEFAULT_CATALOG_URL
ASSET_BASE_URL = os.environ.get("ICATALOG_ASSET_BASE_URL", "") or _DEFAULT_ASSET_BASE_URL
ASSET_SUFFIX = ".webp"

_catalog_file = os.environ.get("ICATALOG_CATALOG_FILE", "").strip()
CATALOG_FILE: Optional[Path] = Path(_catalog_file) if _catalog_file else None
"""Optional local JSON snapshot used instead of :data:`CATALOG_URL`."""

HTTP_TIMEOUT_SECONDS = 20.0

# Presentation ---------------------------------------------------------------

DEFAULT_RANGE = (9760, 10000)
"""Initial values shown in the range inputs."""

NAME_PLACEHOLDER = "—"

APP_TITLE = "Arizona Items"

LOG_LEVEL = os.environ.get("ICATALOG_LOG_LEVEL", "INFO").upper()

__all__ = [
    "APP_TITLE",
    "ASSET_BASE_URL",
    "ASSET_SUFFIX",
    "BATCH_SIZE",
    "CATALOG_FILE",
    "CATALOG_URL",
    "DEFAULT_RANGE",
    "HTTP_TIMEOUT_SECONDS",
    "LOG_LEVEL",
    "NAME_PLACEHOLDER",
    "NEAR_END_THRESHOLD_PX",
]
