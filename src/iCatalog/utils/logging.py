"""Console logging for the catalog browser.

Modules log through ``logging.getLogger(__name__)``; records propagate to the
``iCatalog`` logger configured here. ``ICATALOG_LOG_LEVEL`` picks the level,
so ``DEBUG`` shows skipped payload entries, masked assets and dropped stale
worker results.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import LOG_LEVEL

PACKAGE_LOGGER_NAME = "iCatalog"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the ``iCatalog`` logger, installing its console handler once."""

    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(console)
    level = logging.getLevelName(LOG_LEVEL)
    package_logger.setLevel(level if isinstance(level, int) else logging.INFO)
    _LOGGER = package_logger
    return package_logger


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER_NAME", "get_logger"]
