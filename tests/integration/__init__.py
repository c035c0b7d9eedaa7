"""
Integration Tests - End-to-End Cache Scenarios.

These tests drive the public API with real sleeps instead of a fake
clock, verifying eviction order, expiry and memoization together.

Test Files:
    - test_cache_scenarios.py: Eviction, expiry and memoization flows
"""
