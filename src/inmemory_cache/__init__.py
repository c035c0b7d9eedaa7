"""
In-Memory Cache - TTL Expiration with LRU Eviction.

A single-process key/value cache for memoizing expensive or remote
lookups (API calls, database queries, computed values). Entries expire
lazily after a configurable TTL and the least-recently-used entry is
evicted once the configured capacity is reached.

Main Components:
    - caching: The cache engine (InMemoryCache) and its recency queue
    - config: Pydantic configuration model and YAML loader
    - adapters: Memoization helpers for async lookups

Example:
    >>> from inmemory_cache import CacheConfig, InMemoryCache, NOT_FOUND
    >>> cache = InMemoryCache(CacheConfig(ttl_seconds=60, max_size=1000))
    >>> cache.set("user:1", {"name": "alice"})
    >>> cache.get("user:1")
    {'name': 'alice'}
    >>> cache.get("user:2") is NOT_FOUND
    True

"""

import logging

from inmemory_cache.adapters.cached_loader import CachedLoader, cached
from inmemory_cache.caching.in_memory_cache import (
    NOT_FOUND,
    CacheEntry,
    CacheProtocol,
    CacheStats,
    InMemoryCache,
)
from inmemory_cache.config.models import CacheConfig

__version__ = "0.1.0"

__all__ = [
    "NOT_FOUND",
    "CacheConfig",
    "CacheEntry",
    "CacheProtocol",
    "CacheStats",
    "CachedLoader",
    "InMemoryCache",
    "cached",
    "configure_logging",
]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the cache.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible. Per-access lines
    additionally require ``CacheConfig(log_access=True)``.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import inmemory_cache
        >>> inmemory_cache.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("inmemory_cache").setLevel(level)
