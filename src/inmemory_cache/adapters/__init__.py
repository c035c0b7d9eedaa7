"""
Adapters Package - Memoization on Top of the Cache Engine.

    - CachedLoader: Caching wrapper for async lookup functions
    - cached: Decorator form of CachedLoader
"""

from inmemory_cache.adapters.cached_loader import CachedLoader, cached

__all__ = ["CachedLoader", "cached"]
