"""Process-local LRU cache for cloud snapshots."""

from collections import OrderedDict
from threading import Lock
from typing import Any, Dict, Optional

from pydantic import ValidationError

from tagcloud.cache.base import CloudCache
from tagcloud.config import settings
from tagcloud.errors import CacheUnavailable
from tagcloud.models.tag import TagCloudSnapshot
from tagcloud.utils.logging import get_logger

logger = get_logger(__name__)


class InMemoryCache(CloudCache):
    """
    Keeps snapshots as plain JSON-mode dicts, so a cloud mutated after being
    cached never changes what a later read returns.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        self.capacity = max(1, settings.TAGCLOUD_CACHE_MAX if capacity is None else capacity)
        self._entries: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def cache_get(self, key: str) -> Optional[TagCloudSnapshot]:
        with self._lock:
            data = self._entries.get(key)
            if data is None:
                return None
            self._entries.move_to_end(key)

        try:
            return TagCloudSnapshot.model_validate(data)
        except ValidationError as exc:
            logger.error("Corrupt cache entry %s: %s", key, exc)
            raise CacheUnavailable(f"Cache entry {key} is corrupt") from exc

    def cache_set(self, key: str, snapshot: TagCloudSnapshot) -> None:
        data = snapshot.model_dump(mode="json")
        with self._lock:
            self._entries[key] = data
            self._entries.move_to_end(key)
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted %s from memory cache", evicted)

    def cache_clear(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)
