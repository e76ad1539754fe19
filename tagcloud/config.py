"""Centralized settings for the tag cloud package."""

import os
from pathlib import Path

from tagcloud.errors import ConfigurationError

# Repository root (one level above the tagcloud package).
BASE_DIR = Path(__file__).resolve().parent.parent

CACHE_BACKENDS = ("memory", "file")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


class Settings:
    """
    Lightweight settings loader.

    Avoids extra dependencies while keeping a single import point for env vars.
    """

    def __init__(self) -> None:
        self.TAGCLOUD_STEPS = _int_env("TAGCLOUD_STEPS", 6)
        if self.TAGCLOUD_STEPS <= 0:
            raise ConfigurationError(
                f"TAGCLOUD_STEPS must be a positive integer, got {self.TAGCLOUD_STEPS}"
            )

        self.TAGCLOUD_CACHE_BACKEND = os.environ.get("TAGCLOUD_CACHE_BACKEND", "memory").lower()
        self.TAGCLOUD_CACHE_DIR = Path(
            os.environ.get("TAGCLOUD_CACHE_DIR") or BASE_DIR / ".tagcloud_cache"
        )
        # Number of clouds the in-memory backend keeps before evicting the oldest.
        self.TAGCLOUD_CACHE_MAX = max(1, _int_env("TAGCLOUD_CACHE_MAX", 128))
        self.TAGCLOUD_LOG_LEVEL = os.environ.get("TAGCLOUD_LOG_LEVEL", "INFO").upper()
        if self.TAGCLOUD_LOG_LEVEL not in LOG_LEVELS:
            raise ConfigurationError(
                f"TAGCLOUD_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.TAGCLOUD_LOG_LEVEL!r}"
            )


settings = Settings()

__all__ = ["settings", "Settings", "CACHE_BACKENDS"]
