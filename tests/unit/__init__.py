"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with in-memory collaborators.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_filters.py: Parity and threshold filters
    - test_filter_registry.py: Prefix resolution and tie-break
    - test_number_sources.py: File and in-memory sources
    - test_observers.py: Observers and sinks
    - test_number_pipeline.py: Pipeline run semantics
    - test_config_loader.py: Configuration loading/validation
"""
