"""Logger setup for the sudokusolver package."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

LOGGER_NAME = "sudokusolver"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or one of its children.

    A console handler is attached to the package logger the first time it is
    requested, unless the application already configured one.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)

    if name:
        return root.getChild(name)
    return root


def set_level(level: int | str) -> None:
    get_logger().setLevel(level)
