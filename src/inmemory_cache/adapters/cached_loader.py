"""
Cached Loader - Memoization Wrapper for Async Lookups.

Wraps any async lookup function (API call, database query) so repeated
calls with the same arguments are served from an InMemoryCache.

Design Notes:
    - Decorator/Wrapper pattern
    - Cache key derived from a name plus the call arguments
    - Misses resolved through InMemoryCache.get_or_load(), so a failing
      lookup never populates the cache
    - Tracks hits/misses per loader
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

from inmemory_cache.caching.in_memory_cache import InMemoryCache
from inmemory_cache.config.models import CacheConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CachedLoader(Generic[T]):
    """
    Caching wrapper for an async lookup function.

    Usage:
        async def fetch_user(user_id: int) -> dict: ...

        users = CachedLoader(fetch_user, cache_config=CacheConfig(ttl_seconds=60))

        # First call: cache miss, awaits fetch_user
        user = await users.load(42)

        # Second call with same args: cache hit
        user = await users.load(42)
    """

    def __init__(
        self,
        fetch: Callable[..., Awaitable[T]],
        cache: Optional[InMemoryCache] = None,
        name: Optional[str] = None,
        cache_config: Optional[CacheConfig] = None,
    ) -> None:
        """
        Initialize cached loader.

        Args:
            fetch: Async function to wrap
            cache: Cache instance (creates one if None)
            name: Key prefix (defaults to the function's qualified name)
            cache_config: Cache configuration (used if cache is None)
        """
        self.fetch = fetch
        self.cache = cache if cache is not None else InMemoryCache(cache_config)
        self.name = name or getattr(fetch, "__qualname__", "fetch")
        self._hits = 0
        self._misses = 0

    def make_cache_key(self, *args: Any, **kwargs: Any) -> str:
        """Derive the cache key for one call."""
        return InMemoryCache.make_key(
            self.name, args=args, kwargs=tuple(sorted(kwargs.items()))
        )

    async def load(self, *args: Any, **kwargs: Any) -> T:
        """
        Return the cached result for these arguments, fetching on a miss.

        Raises:
            Whatever the wrapped function raises on a miss
        """
        cache_key = self.make_cache_key(*args, **kwargs)
        fetched = False

        async def fetch_once() -> T:
            nonlocal fetched
            fetched = True
            # Counted before awaiting so a failed fetch is still a miss
            self._misses += 1
            logger.debug(f"Cache MISS for {self.name}")
            return await self.fetch(*args, **kwargs)

        result = await self.cache.get_or_load(cache_key, fetch_once)

        if not fetched:
            self._hits += 1
            logger.debug(f"Cache HIT for {self.name}")

        return result

    def invalidate(self, *args: Any, **kwargs: Any) -> bool:
        """
        Invalidate the cached result for these arguments.

        Returns:
            True if an entry was removed
        """
        return self.cache.delete(self.make_cache_key(*args, **kwargs))

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def get_cache_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics for this loader.

        Returns:
            Loader hits/misses/hit_rate plus the underlying cache stats
        """
        total = self._hits + self._misses
        return {
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": self._hits / total if total > 0 else 0.0,
            "cache": self.cache.get_stats(),
        }


def cached(
    cache: Optional[InMemoryCache] = None,
    name: Optional[str] = None,
    cache_config: Optional[CacheConfig] = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator memoizing an async function in an InMemoryCache.

    The backing CachedLoader is exposed as ``.loader`` on the wrapper.

    Example:
        >>> @cached(cache_config=CacheConfig(ttl_seconds=30, max_size=256))
        ... async def fetch_price(symbol: str) -> float:
        ...     ...
        >>> fetch_price.loader.invalidate("AAPL")
    """

    def decorator(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        loader = CachedLoader(fn, cache=cache, name=name, cache_config=cache_config)

        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await loader.load(*args, **kwargs)

        wrapper.loader = loader  # type: ignore[attr-defined]
        return wrapper

    return decorator
