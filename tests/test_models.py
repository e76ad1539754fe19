"""Tests for the tag and snapshot models."""

import math

import pytest
from pydantic import ValidationError

from tagcloud.models.tag import Tag, TagCloudSnapshot


class TestTag:
    def test_explicit_distributed_value_wins(self) -> None:
        assert Tag(name="a", count=100, distributed=-2.5).distributed_value() == -2.5

    def test_distributed_value_defaults_to_log_count(self) -> None:
        assert Tag(name="a", count=20).distributed_value() == pytest.approx(math.log(20))

    def test_zero_count_distributes_to_zero(self) -> None:
        assert Tag(name="a").distributed_value() == 0.0

    def test_negative_count_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tag(name="a", count=-1)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_distributed_is_rejected(self, value) -> None:
        with pytest.raises(ValidationError):
            Tag(name="a", distributed=value)

    def test_optional_metadata(self) -> None:
        tag = Tag(name="a", id=12, description="About a", link="/tags/a")
        assert (tag.id, tag.description, tag.link) == (12, "About a", "/tags/a")


class TestTagCloudSnapshot:
    def test_json_round_trip_keeps_id_type(self) -> None:
        for cloud_id in (5, "5"):
            snap = TagCloudSnapshot(id=cloud_id, steps=6, tags=[Tag(name="x", weight=1)])
            assert TagCloudSnapshot.model_validate_json(snap.model_dump_json()) == snap

    def test_steps_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            TagCloudSnapshot(id=1, steps=0)
