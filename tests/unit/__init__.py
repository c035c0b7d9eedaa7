"""
Unit Tests - Testing Individual Components in Isolation.

Expiry tests use the FakeClock fixture so they are fast and deterministic.

Test Files:
    - test_in_memory_cache.py: Cache engine operations
    - test_get_or_load.py: Async fallback loading
    - test_recency_list.py: Recency queue
    - test_config_loader.py: Configuration loading/validation
    - test_cached_loader.py: Memoization adapter
"""
