"""
Configuration Package - Models and Loaders.

    - CacheConfig: Pydantic model for cache settings (TTL, capacity)
    - ConfigLoader: YAML loader with validation

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
"""

from inmemory_cache.config.loader import ConfigLoader, load_config
from inmemory_cache.config.models import CacheConfig

__all__ = ["CacheConfig", "ConfigLoader", "load_config"]
