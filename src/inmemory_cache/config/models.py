"""
Configuration Models - Pydantic Models for Type-Safe Config.

Cache configuration is validated once at construction and is immutable
afterwards.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class CacheConfig(BaseModel):
    """Configuration for the in-memory cache."""

    # Default TTL in seconds; 0 means entries never expire by default
    ttl_seconds: float = Field(default=0.0, ge=0)

    # Maximum number of entries; None means unbounded
    max_size: Optional[int] = Field(default=None, ge=1)

    # Log cache hits/misses/sets at DEBUG
    log_access: bool = False

    model_config = {"frozen": True}
