"""Logging setup shared by all FlashDeck modules."""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER = "flashdeck"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _configure_root(level: Optional[str] = None) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not any(getattr(h, "_flashdeck", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._flashdeck = True
        root.addHandler(handler)
        root.propagate = False
    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    return root


def setup_logger(name: str = ROOT_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the ``flashdeck`` namespace.

    The first call installs one stderr handler on the package root logger;
    later calls reuse it, so repeated setup never duplicates output.

    Args:
        name: Dotted logger name, e.g. "flashdeck.loader"
        level: Level name; defaults to the LOG_LEVEL environment variable

    Returns:
        Configured logger
    """
    root = logging.getLogger(ROOT_LOGGER)
    if level or not root.handlers:
        root = _configure_root(level)
    if name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
