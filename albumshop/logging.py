"""
Logging setup for Album Shop.

Usage:
    from albumshop.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Vercel adds its own timestamps
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Attach one stdout handler to the root logger, unless one exists."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = _get_log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    on_vercel = os.environ.get("VERCEL") == "1"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if on_vercel else LOG_FORMAT))
    root.addHandler(handler)

    # Upstash client logs every REST call through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make a user-supplied string (album titles) safe to log.

    Control characters are escaped so a title can't forge log lines (CWE-117),
    and long values are cut to ``max_length``.
    """
    if not value:
        return "N/A"
    safe_value = (
        str(value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."
