"""Tiny logger helper to keep consistent formatting."""

import logging
from typing import Optional

from tagcloud.config import settings


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger with a simple stdout handler if none is configured.
    """
    logger = logging.getLogger(name or "tagcloud")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.TAGCLOUD_LOG_LEVEL)
    return logger
