"""
Caching Layer.

Provides the cache engine:
    - InMemoryCache: TTL-based caching with LRU eviction
    - CacheEntry: A stored value with its expiry
    - CacheStats: Statistics snapshot
    - RecencyList: Doubly linked recency queue backing LRU order
"""

from inmemory_cache.caching.in_memory_cache import (
    NOT_FOUND,
    CacheEntry,
    CacheProtocol,
    CacheStats,
    InMemoryCache,
    Missing,
)
from inmemory_cache.caching.recency_list import RecencyList, RecencyNode

__all__ = [
    "NOT_FOUND",
    "CacheEntry",
    "CacheProtocol",
    "CacheStats",
    "InMemoryCache",
    "Missing",
    "RecencyList",
    "RecencyNode",
]
