"""
Logging setup for jsonlens.

The library only creates loggers; handlers are attached by ``setup_logging``,
which the CLI calls.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_ROOT_LOGGER = "jsonlens"


def setup_logging(level: int = logging.WARNING, format_string: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    Args:
        level: Logging level (default: WARNING)
        format_string: Optional custom format string

    Returns:
        The configured ``jsonlens`` logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``jsonlens`` namespace."""
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
