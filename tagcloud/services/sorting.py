"""Ordering strategies for the tags in a cloud."""

import locale
import random
from enum import Enum
from functools import cmp_to_key
from typing import List, Optional, Sequence, Union

from tagcloud.errors import InvalidArgument
from tagcloud.models.tag import Tag
from tagcloud.utils.logging import get_logger

logger = get_logger(__name__)


class SortCriterion(str, Enum):
    NAME = "name"
    COUNT = "count"
    RANDOM = "random"


def parse_criterion(value: Union[SortCriterion, str]) -> SortCriterion:
    """
    Resolve a criterion given as enum member or case-insensitive string.
    """
    if isinstance(value, SortCriterion):
        return value
    if isinstance(value, str):
        try:
            return SortCriterion(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(c.value for c in SortCriterion)
    raise InvalidArgument(f"Unknown sort criterion {value!r}; expected one of: {allowed}")


def compare_by_name(a: Tag, b: Tag) -> int:
    """Locale-aware comparison of tag names."""
    return locale.strcoll(a.name, b.name)


def compare_by_count(a: Tag, b: Tag) -> int:
    """Highest count first; equal counts compare as 0."""
    if a.count == b.count:
        return 0
    return 1 if a.count < b.count else -1


_COMPARATORS = {
    SortCriterion.NAME: compare_by_name,
    SortCriterion.COUNT: compare_by_count,
}


def sort_tags(
    tags: Sequence[Tag],
    criterion: Union[SortCriterion, str],
    rng: Optional[random.Random] = None,
) -> List[Tag]:
    """
    Return a new list with `tags` ordered by `criterion`.

    Name and count orders are stable, so ties keep their relative order.
    Random order is a uniform shuffle and is not reproducible unless an
    explicitly seeded `rng` is passed.
    """
    criterion = parse_criterion(criterion)
    ordered = list(tags)

    if criterion is SortCriterion.RANDOM:
        (rng or random).shuffle(ordered)
    else:
        ordered.sort(key=cmp_to_key(_COMPARATORS[criterion]))

    logger.debug("Sorted %d tags by %s", len(ordered), criterion.value)
    return ordered
