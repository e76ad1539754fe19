"""Pick the cache backend configured through TAGCLOUD_CACHE_BACKEND."""

from typing import Optional

from tagcloud.cache.base import CloudCache
from tagcloud.cache.file import FileCache
from tagcloud.cache.memory import InMemoryCache
from tagcloud.config import CACHE_BACKENDS, settings
from tagcloud.errors import ConfigurationError

_default_cache: Optional[CloudCache] = None


def get_cache(backend: Optional[str] = None) -> CloudCache:
    """
    Build a cache store for `backend`, or return the shared default one.

    The default (backend=None) is created once per process so that clouds
    written by one TagCloud can be read back by another.
    """
    global _default_cache

    if backend is None and _default_cache is not None:
        return _default_cache

    name = (backend or settings.TAGCLOUD_CACHE_BACKEND).lower()
    if name == "memory":
        cache: CloudCache = InMemoryCache()
    elif name == "file":
        cache = FileCache()
    else:
        raise ConfigurationError(
            f"Unknown cache backend {name!r}; expected one of: {', '.join(CACHE_BACKENDS)}"
        )

    if backend is None:
        _default_cache = cache
    return cache


def reset_default_cache() -> None:
    """Forget the shared default store (used between tests)."""
    global _default_cache
    _default_cache = None
