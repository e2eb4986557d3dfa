"""
Test Suite for Number Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline and CLI tests
    - performance/: Throughput benchmarks
    - fixtures/: Shared test data and helpers

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/number_pipeline        # With coverage
"""
