"""Cache store interface shared by every backend."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from tagcloud.models.tag import TagCloudSnapshot

CACHE_KEY_PREFIX = "tagadelic_cloud_"


def cache_key(cloud_id: Union[int, str]) -> str:
    """
    Build the cache key a cloud is stored under.
    """
    return f"{CACHE_KEY_PREFIX}{cloud_id}"


class CloudCache(ABC):
    """
    Key-value store holding cloud snapshots.

    Implementations return None for a missing key and raise CacheUnavailable
    when the store itself fails or holds an unreadable entry.
    """

    @abstractmethod
    def cache_get(self, key: str) -> Optional[TagCloudSnapshot]:
        ...

    @abstractmethod
    def cache_set(self, key: str, snapshot: TagCloudSnapshot) -> None:
        ...

    @abstractmethod
    def cache_clear(self, key: Optional[str] = None) -> None:
        """Drop one entry, or every entry when key is None."""
