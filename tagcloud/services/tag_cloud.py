"""The weighted tag cloud: a collection of tags bucketed into display bands."""

import random
from typing import Iterable, Iterator, List, Optional, Union

from tagcloud.cache.base import CloudCache, cache_key
from tagcloud.cache.factory import get_cache
from tagcloud.config import settings
from tagcloud.errors import CloudNotFound
from tagcloud.models.tag import Tag, TagCloudSnapshot
from tagcloud.services.sorting import SortCriterion, sort_tags
from tagcloud.services.weighting import validate_steps, weight_tags
from tagcloud.utils.logging import get_logger

logger = get_logger(__name__)

CloudId = Union[int, str]


class TagCloud:
    """
    Ordered tags plus the number of bands they are weighted into.

    Weights are always relative to the full set of tags currently in the
    cloud. They are recomputed lazily: adding a tag marks the cloud dirty,
    and the next get_tags() recalculates every band. Reordering never
    dirties the cloud since the set itself is unchanged.
    """

    def __init__(
        self,
        cloud_id: CloudId,
        tags: Optional[Iterable[Tag]] = None,
        steps: Optional[int] = None,
        cache: Optional[CloudCache] = None,
    ) -> None:
        self._id = cloud_id
        self._steps = validate_steps(settings.TAGCLOUD_STEPS if steps is None else steps)
        self._tags: List[Tag] = list(tags or [])
        self._needs_recalc = True
        self._cache = cache

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.get_tags())

    def __repr__(self) -> str:
        return f"TagCloud(id={self._id!r}, steps={self._steps}, tags={len(self._tags)})"

    @property
    def id(self) -> CloudId:
        return self._id

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def needs_recalc(self) -> bool:
        return self._needs_recalc

    @property
    def cache_key(self) -> str:
        return cache_key(self._id)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def get_tags(self) -> List[Tag]:
        """
        Return the weighted tags in their current order.
        """
        if self._needs_recalc:
            self.calculate_tag_weights()
        return list(self._tags)

    def add_tag(self, tag: Tag) -> "TagCloud":
        self._tags.append(tag)
        self._needs_recalc = True
        return self

    def calculate_tag_weights(self) -> "TagCloud":
        """
        Recompute the band of every tag relative to the whole cloud.
        """
        self._tags = weight_tags(self._tags, self._steps)
        self._needs_recalc = False
        logger.debug("Recalculated weights for cloud %s (%d tags)", self._id, len(self._tags))
        return self

    def sort_tags_by(
        self,
        criterion: Union[SortCriterion, str],
        rng: Optional[random.Random] = None,
    ) -> "TagCloud":
        """
        Reorder the tags by name, count (highest first) or at random.

        Raises InvalidArgument for any other criterion.
        """
        self._tags = sort_tags(self._tags, criterion, rng=rng)
        return self

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def set_cache(self, cache: CloudCache) -> "TagCloud":
        self._cache = cache
        return self

    def get_cache(self) -> CloudCache:
        if self._cache is None:
            self.set_cache(get_cache())
        return self._cache

    def to_snapshot(self) -> TagCloudSnapshot:
        return TagCloudSnapshot(id=self._id, steps=self._steps, tags=self.get_tags())

    @classmethod
    def from_snapshot(
        cls,
        snapshot: TagCloudSnapshot,
        cache: Optional[CloudCache] = None,
    ) -> "TagCloud":
        cloud = cls(snapshot.id, snapshot.tags, steps=snapshot.steps, cache=cache)
        # Cached tags carry weights computed against this exact set.
        if all(tag.weight is not None for tag in snapshot.tags):
            cloud._needs_recalc = False
        return cloud

    def to_cache(self) -> "TagCloud":
        """
        Write the cloud to its cache store, calculating weights first if needed.
        """
        self.get_cache().cache_set(self.cache_key, self.to_snapshot())
        logger.debug("Cached cloud %s under %s", self._id, self.cache_key)
        return self

    @classmethod
    def from_cache(
        cls,
        cloud_id: CloudId,
        cache: Optional[CloudCache] = None,
    ) -> "TagCloud":
        """
        Rebuild a previously cached cloud.

        Raises CloudNotFound if nothing is stored under the cloud's key, and
        lets CacheUnavailable from the store propagate.
        """
        store = cache if cache is not None else get_cache()
        key = cache_key(cloud_id)
        snapshot = store.cache_get(key)
        if snapshot is None:
            raise CloudNotFound(key)
        logger.debug("Loaded cloud %s from cache", cloud_id)
        return cls.from_snapshot(snapshot, cache=store)
