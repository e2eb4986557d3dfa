"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that registry, sources, pipeline and observers work
together, including the command-line entry point.

Test Files:
    - test_pipeline_with_registry.py: execute() scenarios
    - test_cli.py: Exit codes and output of the CLI
"""
