"""Logging setup utilities."""
from __future__ import annotations

import logging

from src.config import LOG_FORMAT


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return logger with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
