"""
In-Memory Cache - TTL-based Expiration with LRU Eviction.

Single-process key/value cache for memoizing expensive lookups.

Design Notes:
    - Lazy expiration: expired entries are removed only when accessed,
      swept by cleanup(), or counted out by size()/keys()/values()/items()
    - LRU eviction by entry count when max_size is reached
    - Recency kept in an explicit doubly linked list (RecencyList)
    - No internal locking; meant for one thread or one event loop
    - Concurrent misses on the same key are not coalesced: each caller
      runs its own loader and the last one to finish wins
"""

from __future__ import annotations

import hashlib
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    Union,
)

from inmemory_cache.caching.recency_list import RecencyList, RecencyNode
from inmemory_cache.config.models import CacheConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Missing(Enum):
    """Marker type for lookups that find nothing."""

    NOT_FOUND = "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


# Returned by get() on a miss; a stored None is a hit.
NOT_FOUND = Missing.NOT_FOUND


class CacheProtocol(Protocol):
    """Protocol for cache implementations."""

    def get(self, key: str) -> Any:
        """Get value from cache or NOT_FOUND."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Set value in cache."""
        ...

    def delete(self, key: str) -> bool:
        """Delete a cache entry."""
        ...

    def clear(self) -> None:
        """Clear all cache entries."""
        ...


@dataclass
class CacheEntry:
    """A single cache entry with metadata."""

    value: Any
    expires_at: Optional[float] = None
    created_at: float = 0.0

    def is_expired_at(self, now: float) -> bool:
        """Check if entry has expired at the given clock reading."""
        if self.expires_at is None:
            return False
        return now > self.expires_at


@dataclass
class CacheStats:
    """Point-in-time cache statistics."""

    size: int = 0
    max_size: Optional[int] = None
    ttl_seconds: float = 0.0
    expired: int = 0
    active: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


@dataclass
class _Counters:
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0


class InMemoryCache(Generic[T]):
    """
    TTL-based cache with LRU eviction policy.

    Features:
        - Default TTL applied on every set() and touch()
        - Entry-count capacity with least-recently-used eviction
        - Async fallback loading on a miss (get_or_load)
        - Statistics snapshot without side effects

    Every successful lookup (get, has, touch) and every set() moves the
    key to the most-recently-used end. keys()/values()/items()/size()
    sweep expired entries first but do not change recency.
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """
        Initialize cache.

        Args:
            config: Cache configuration
            clock: Monotonic time source in seconds (time.monotonic if None)
        """
        self.config = config or CacheConfig()
        self._clock = clock or time.monotonic
        self._store: Dict[str, RecencyNode] = {}
        self._order = RecencyList()
        self._counters = _Counters()

    @property
    def ttl_seconds(self) -> float:
        return self.config.ttl_seconds

    @property
    def max_size(self) -> Optional[int]:
        return self.config.max_size

    def get(self, key: str) -> Union[T, Missing]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value, or NOT_FOUND if absent or expired
        """
        node = self._store.get(key)

        if node is None:
            self._counters.misses += 1
            if self.config.log_access:
                logger.debug(f"Cache MISS: {key}")
            return NOT_FOUND

        if node.entry.is_expired_at(self._clock()):
            self._remove_node(node)
            self._counters.expirations += 1
            self._counters.misses += 1
            if self.config.log_access:
                logger.debug(f"Cache EXPIRED: {key}")
            return NOT_FOUND

        self._order.move_to_end(node)
        self._counters.hits += 1
        if self.config.log_access:
            logger.debug(f"Cache HIT: {key}")

        return node.entry.value

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Get from cache or await the loader and store its result.

        The loader is only called on a miss. If it raises, the exception
        propagates unchanged and nothing is stored.

        Args:
            key: Cache key
            loader: Zero-argument coroutine function producing the value

        Returns:
            Cached or loaded value
        """
        cached = self.get(key)
        if cached is not NOT_FOUND:
            return cached

        try:
            value = await loader()
        except Exception as e:
            if self.config.log_access:
                logger.debug(f"Cache LOAD FAILED: {key}: {e!r}")
            raise

        self.set(key, value)
        return value

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """
        Get from cache or compute and store.

        Synchronous counterpart of get_or_load(); a failing compute_fn
        stores nothing.

        Args:
            key: Cache key
            compute_fn: Function to compute value if not cached

        Returns:
            Cached or computed value
        """
        cached = self.get(key)
        if cached is not NOT_FOUND:
            return cached

        value = compute_fn()
        self.set(key, value)
        return value

    def set(self, key: str, value: T) -> None:
        """
        Set value in cache with the default TTL.

        Overwriting an existing key counts as a use and never evicts.

        Args:
            key: Cache key
            value: Value to cache
        """
        now = self._clock()
        entry = CacheEntry(
            value=value,
            expires_at=self._expiry_from(now, self.config.ttl_seconds),
            created_at=now,
        )

        node = self._store.get(key)
        if node is not None:
            node.entry = entry
            self._order.move_to_end(node)
        else:
            self._evict_if_needed()
            self._store[key] = self._order.append(key, entry)

        if self.config.log_access:
            logger.debug(f"Cache SET: {key} (TTL={self.config.ttl_seconds}s)")

    def has(self, key: str) -> bool:
        """
        Check whether a live entry exists.

        Expired entries are removed. A positive answer counts as a use.

        Args:
            key: Cache key

        Returns:
            True if key is present and not expired
        """
        node = self._store.get(key)
        if node is None:
            return False

        if node.entry.is_expired_at(self._clock()):
            self._remove_node(node)
            self._counters.expirations += 1
            return False

        self._order.move_to_end(node)
        return True

    def delete(self, key: str) -> bool:
        """
        Delete a cache entry, expired or not.

        Args:
            key: Cache key to delete

        Returns:
            True if entry was removed, False if not found
        """
        node = self._store.get(key)
        if node is None:
            return False
        self._remove_node(node)
        return True

    def clear(self) -> None:
        """Clear all cache entries."""
        self._store.clear()
        self._order.clear()
        logger.info("Cache CLEARED")

    def size(self) -> int:
        """Number of live entries (sweeps expired entries first)."""
        self.cleanup()
        return len(self._store)

    def keys(self) -> List[str]:
        """Live keys, least recently used first."""
        self.cleanup()
        return [node.key for node in self._order]

    def values(self) -> List[T]:
        """Live values, least recently used first."""
        self.cleanup()
        return [node.entry.value for node in self._order]

    def items(self) -> List[Tuple[str, T]]:
        """Live (key, value) pairs, least recently used first."""
        self.cleanup()
        return [(node.key, node.entry.value) for node in self._order]

    def cleanup(self) -> int:
        """
        Remove every entry that has expired.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        removed = 0

        for node in self._order:
            if node.entry.is_expired_at(now):
                self._remove_node(node)
                removed += 1

        if removed:
            self._counters.expirations += removed
            logger.debug(f"Cache CLEANUP removed {removed} expired entries")

        return removed

    def get_stats(self) -> CacheStats:
        """
        Get cache statistics.

        Counts are taken in one pass at a single clock reading and
        nothing is removed, so expired + active == size.
        """
        now = self._clock()
        expired = sum(1 for node in self._order if node.entry.is_expired_at(now))

        return CacheStats(
            size=len(self._store),
            max_size=self.config.max_size,
            ttl_seconds=self.config.ttl_seconds,
            expired=expired,
            active=len(self._store) - expired,
            hits=self._counters.hits,
            misses=self._counters.misses,
            evictions=self._counters.evictions,
            expirations=self._counters.expirations,
        )

    def touch(self, key: str, ttl_seconds: Optional[float] = None) -> bool:
        """
        Renew the expiry of a live entry.

        Args:
            key: Cache key
            ttl_seconds: New TTL; 0 means never expire, None reapplies
                the configured default

        Returns:
            True if renewed, False if key is absent or already expired

        Raises:
            ValueError: If ttl_seconds is negative
        """
        if ttl_seconds is not None and ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be >= 0, got {ttl_seconds}")

        node = self._store.get(key)
        now = self._clock()
        if node is None or node.entry.is_expired_at(now):
            return False

        ttl = ttl_seconds if ttl_seconds is not None else self.config.ttl_seconds
        node.entry.expires_at = self._expiry_from(now, ttl)
        self._order.move_to_end(node)
        return True

    def _remove_node(self, node: RecencyNode) -> None:
        """Remove entry from store and recency list."""
        del self._store[node.key]
        self._order.remove(node)

    def _evict_if_needed(self) -> None:
        """Evict least recently used entries until a new one fits."""
        max_size = self.config.max_size
        if max_size is None:
            return

        while len(self._store) >= max_size:
            node = self._order.pop_first()
            if node is None:
                break
            del self._store[node.key]
            self._counters.evictions += 1
            logger.debug(f"Cache EVICTED (LRU): {node.key}")

    @staticmethod
    def _expiry_from(now: float, ttl_seconds: float) -> Optional[float]:
        return now + ttl_seconds if ttl_seconds > 0 else None

    @staticmethod
    def make_key(operation: str, **params: Any) -> str:
        """
        Create a cache key from operation and parameters.

        Args:
            operation: Operation name (e.g., "fetch_user")
            **params: Parameters to hash

        Returns:
            Cache key in format "operation:params_hash"
        """
        # Sort params for consistent ordering
        sorted_params = sorted(params.items())
        param_str = str(sorted_params)

        param_hash = hashlib.sha256(param_str.encode()).hexdigest()[:16]

        return f"{operation}:{param_hash}"
