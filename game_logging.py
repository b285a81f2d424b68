"""Logging configuration for the monster fight game.

Diagnostics go through the standard ``logging`` module and are rendered by
rich on stderr, leaving stdout to the game itself.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

import config


def setup_logging(level: int = config.LOG_LEVEL) -> None:
    """Set up the root logger with a rich handler on stderr.

    Args:
        level: The logging level to set (default: ``config.LOG_LEVEL``)
    """
    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``."""
    return logging.getLogger(name)
