"""Centralized logging helpers."""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "collext"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for *component*.

    Handlers are only attached to the root ``collext`` logger so child
    loggers propagate into a single stream.
    """
    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
    if component:
        return root.getChild(component)
    return root


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Set the package log level; ``verbose`` switches on DEBUG output."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
