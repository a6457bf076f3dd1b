"""Logging utilities tailored for word search generation."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """Translate ``"debug"``/``"WARNING"`` style names into logging levels."""

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Install a single stderr handler on the root logger.

    Whole-board attempts are reported at INFO and per-word placement at
    DEBUG, so ``DEBUG`` gets noisy on large dictionaries.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")


def set_debug(enabled: bool) -> None:
    """Force DEBUG output for the ``wordsearch`` loggers, or defer to root."""

    logging.getLogger("wordsearch").setLevel(logging.DEBUG if enabled else logging.NOTSET)
