"""
Performance Tests.

Sanity benchmarks for the cache engine:
    - Eviction-heavy inserts stay fast
    - Recency promotion cost does not grow with cache size
"""
