"""
Performance Tests.

Benchmarks for Number Pipeline:
    - 200,000 numbers per run < 5 seconds
    - Registry lookups with many prefixes
"""
