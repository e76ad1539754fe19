"""Shared fixtures for tag cloud tests."""

from typing import List

import pytest

from tagcloud.cache.factory import reset_default_cache
from tagcloud.cache.memory import InMemoryCache
from tagcloud.models.tag import Tag


@pytest.fixture(autouse=True)
def _fresh_default_cache():
    reset_default_cache()
    yield
    reset_default_cache()


@pytest.fixture
def memory_cache() -> InMemoryCache:
    return InMemoryCache(capacity=4)


@pytest.fixture
def sample_tags() -> List[Tag]:
    return [
        Tag(name="python", count=40),
        Tag(name="django", count=12),
        Tag(name="async", count=3),
        Tag(name="typing", count=1),
    ]
