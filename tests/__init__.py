"""
Test Suite for In-Memory Cache.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end scenarios against the real clock
    - performance/: Throughput sanity checks

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not performance"             # Skip benchmarks
    pytest --cov=src/inmemory_cache         # With coverage
"""
