"""Bucketing of dampened tag popularity into discrete weight bands."""

import math
from typing import Iterable, List, Sequence

from tagcloud.errors import ConfigurationError
from tagcloud.models.tag import Tag
from tagcloud.utils.logging import get_logger

logger = get_logger(__name__)

# Floor for the value range so identical values never divide by zero.
MIN_RANGE = 0.01
# Widens the range slightly so the largest value still rounds down into the last band.
RANGE_PADDING = 1.0001


def validate_steps(steps: int) -> int:
    """
    Return steps unchanged, or raise ConfigurationError if it is not a positive int.
    """
    if isinstance(steps, bool) or not isinstance(steps, int) or steps <= 0:
        raise ConfigurationError(f"steps must be a positive integer, got {steps!r}")
    return steps


def calculate_weight(value: float, minimum: float, value_range: float, steps: int) -> int:
    """
    Map a single value into a band in [1, steps].
    """
    weight = 1 + math.floor(steps * (value - minimum) / value_range)
    return min(max(weight, 1), steps)


def compute_weights(values: Iterable[float], steps: int) -> List[int]:
    """
    Bucket every value into one of `steps` bands, relative to the whole set.

    Strategy:
      1. One pass to find the minimum and maximum value.
      2. range = max(0.01, max - min) * 1.0001
      3. weight = 1 + floor(steps * (value - min) / range) for every value.

    Returns the weights in input order; an empty input gives an empty list.
    """
    validate_steps(steps)
    values = list(values)

    minimum = math.inf
    maximum = -math.inf
    for value in values:
        minimum = min(minimum, value)
        maximum = max(maximum, value)

    if not values:
        return []

    value_range = max(MIN_RANGE, maximum - minimum) * RANGE_PADDING
    return [calculate_weight(value, minimum, value_range, steps) for value in values]


def weight_tags(tags: Sequence[Tag], steps: int) -> List[Tag]:
    """
    Return copies of `tags` with `weight` set, in the same order.

    The input tags are left untouched, so a tag shared between clouds keeps
    whatever weight each cloud gave its own copy.
    """
    weights = compute_weights((tag.distributed_value() for tag in tags), steps)
    logger.debug("Weighted %d tags into %d steps", len(weights), steps)
    return [
        tag.model_copy(update={"weight": weight})
        for tag, weight in zip(tags, weights)
    ]
