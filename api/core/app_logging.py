"""Logging configuration helpers."""

from __future__ import annotations

import logging
import os

APP_LOGGERS = ("core", "foods", "main")


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "DEBUG").strip().upper() or "DEBUG"


def configure_logging() -> None:
    """Attach a single stream handler to the application loggers."""
    level = log_level()
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if logger.handlers:
            continue
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
