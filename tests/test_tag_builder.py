"""Tests for building clouds from raw tag usage rows."""

import math

from tagcloud.services.tag_builder import (
    aggregate_tag_counts,
    build_cloud,
    build_tags,
    normalize_tag_name,
)


def test_normalize_tag_name() -> None:
    assert normalize_tag_name("  Machine   Learning ") == "machine learning"
    assert normalize_tag_name("") == ""


def test_aggregate_merges_and_filters() -> None:
    rows = [
        {"name": "Python", "count": 3},
        {"name": " python", "count": "2"},
        {"name": "rust", "count": 4},
        {"name": "", "count": 9},
        {"name": "zero", "count": 0},
        {"name": "broken", "count": "lots"},
        {"name": "missing"},
    ]
    assert aggregate_tag_counts(rows) == [
        {"name": "python", "count": 5},
        {"name": "rust", "count": 4},
    ]


def test_build_tags_uses_log_count() -> None:
    tags = build_tags([{"name": "a", "count": 10}, {"name": "b", "count": 1}])
    assert [(t.name, t.count) for t in tags] == [("a", 10), ("b", 1)]
    assert tags[0].distributed == math.log(10)
    assert tags[1].distributed == 0.0


def test_build_cloud() -> None:
    rows = [{"name": n, "count": c} for n, c in [("a", 1), ("b", 10), ("c", 100)]]
    cloud = build_cloud("rows", rows, steps=3)

    assert cloud.id == "rows"
    assert cloud.steps == 3
    weights = {t.name: t.weight for t in cloud.get_tags()}
    assert weights == {"a": 1, "b": 2, "c": 3}
