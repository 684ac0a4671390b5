"""Logging configuration helpers for LinguaQuiz."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int | str = logging.INFO) -> Logger:
    """Configure basic logging for the application and return the package logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger = logging.getLogger("lingua_quiz")
    logger.setLevel(level)
    return logger
