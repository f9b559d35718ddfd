"""
Logging for listing photo validation.

Only the package logger ``listing-photos`` owns a handler. Components log
through children such as ``listing-photos.validator`` which propagate to it,
so reconfiguring the package logger changes every component at once.

Environment Variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    LOG_FORMAT: "structured" or "simple" (default structured)
"""

import os
import sys
import logging
from typing import Optional

PACKAGE_LOGGER = "listing-photos"

LOG_FORMATS = {
    "structured": (
        "%(asctime)s | %(name)s | %(levelname)-8s | "
        "%(filename)s:%(lineno)d | %(message)s"
    ),
    "simple": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class StdoutHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stdout`` is when a record is emitted."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        pass


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name, or ``LOG_LEVEL`` when omitted, to a logging level."""
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved = logging.getLevelName(name)
    # Unknown names come back as the string "Level <name>"
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Optional[str] = None, format_type: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger. Safe to call repeatedly.

    Args:
        level: Level name, defaults to ``LOG_LEVEL``
        format_type: "structured" or "simple", defaults to ``LOG_FORMAT``

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolve_level(level))
    package_logger.propagate = False

    format_name = (format_type or os.getenv("LOG_FORMAT", "structured")).lower()
    formatter = logging.Formatter(
        LOG_FORMATS.get(format_name, LOG_FORMATS["simple"]), datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = next(
        (h for h in package_logger.handlers if isinstance(h, StdoutHandler)), None
    )
    if handler is None:
        handler = StdoutHandler()
        package_logger.addHandler(handler)
    handler.setFormatter(formatter)

    return package_logger


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    Get the logger for a component of the package.

    Args:
        component: Dotted suffix such as "validator" or "worker.ForkProcess-1";
            the package logger itself when omitted
    """
    if not component:
        return logging.getLogger(PACKAGE_LOGGER)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{component}")


logger = configure_logging()
