"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import pytest

from inmemory_cache.caching.in_memory_cache import InMemoryCache
from inmemory_cache.config.models import CacheConfig


class FakeClock:
    """Manually advanced time source for deterministic expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def make_cache(clock: FakeClock):
    """Factory for caches driven by the fake clock."""

    def _make(ttl_seconds: float = 0.0, max_size=None, **kwargs) -> InMemoryCache:
        config = CacheConfig(ttl_seconds=ttl_seconds, max_size=max_size, **kwargs)
        return InMemoryCache(config, clock=clock)

    return _make
