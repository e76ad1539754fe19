"""Builders shared across test modules."""

from typing import List, Sequence

from tagcloud.models.tag import Tag


def tags_with_values(values: Sequence[float]) -> List[Tag]:
    """One tag per distributed value, named t0, t1, ..."""
    return [Tag(name=f"t{i}", count=i + 1, distributed=v) for i, v in enumerate(values)]
