"""Services for turning raw tag usage rows into a weighted cloud."""

import math
from collections import Counter
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from tagcloud.models.tag import Tag
from tagcloud.services.tag_cloud import TagCloud
from tagcloud.utils.logging import get_logger

logger = get_logger(__name__)


def normalize_tag_name(name: str) -> str:
    """
    Normalize tag names for aggregation and comparison:
    - strip leading/trailing whitespace
    - collapse internal whitespace
    - lowercase
    """
    if not name:
        return ""
    return " ".join(name.strip().lower().split())


def aggregate_tag_counts(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Merge raw tag rows into one entry per normalized name.

    Input:
      Iterable of { "name": str, "count": int }; the same tag may appear
      several times (e.g. once per tagged item).

    Returns:
      List of { "name": str, "count": int }, most common first, after:
        - summing counts per normalized name
        - dropping empty names
        - dropping rows whose count is missing, unparsable or <= 0
    """
    counter: Counter = Counter()

    for row in rows:
        name = normalize_tag_name(str(row.get("name") or ""))
        if not name:
            continue
        try:
            count = int(row.get("count") or 0)
        except (TypeError, ValueError):
            logger.debug("Skipping tag %r with unparsable count %r", name, row.get("count"))
            continue
        if count <= 0:
            continue
        counter[name] += count

    return [{"name": name, "count": count} for name, count in counter.most_common()]


def build_tags(rows: Iterable[Mapping[str, Any]]) -> List[Tag]:
    """
    Build tags from raw rows, with the distributed value set to log(count).
    """
    return [
        Tag(name=row["name"], count=row["count"], distributed=math.log(row["count"]))
        for row in aggregate_tag_counts(rows)
    ]


def build_cloud(
    cloud_id: Union[int, str],
    rows: Iterable[Mapping[str, Any]],
    steps: Optional[int] = None,
) -> TagCloud:
    """
    Aggregate raw rows and return a cloud ready to be weighted.
    """
    tags = build_tags(rows)
    logger.info("Built cloud %s from %d distinct tags", cloud_id, len(tags))
    return TagCloud(cloud_id, tags, steps=steps)
