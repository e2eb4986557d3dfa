"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package.

Sources:
    - FileNumberSource: Whitespace-separated integers from a text file
    - InMemoryNumberSource: Fixed sequences keyed by identifier

Sinks:
    - ConsoleSink, FileSink, NullSink, MemorySink

Observers:
    - PrintObserver: Reports every passing number
    - CountObserver: Reports how many numbers passed

Metrics:
    - InMemoryMetricsCollector: Per-run aggregates (count, total, last)
"""

from number_pipeline.adapters.file_source import FileNumberSource
from number_pipeline.adapters.memory_source import InMemoryNumberSource
from number_pipeline.adapters.metrics_collector import (
    InMemoryMetricsCollector,
    MetricSummary,
)
from number_pipeline.adapters.observers import (
    CountObserver,
    PrintObserver,
    create_observers,
)
from number_pipeline.adapters.sinks import (
    ConsoleSink,
    FileSink,
    MemorySink,
    NullSink,
    create_sink,
)

__all__ = [
    "FileNumberSource",
    "InMemoryNumberSource",
    "InMemoryMetricsCollector",
    "MetricSummary",
    "CountObserver",
    "PrintObserver",
    "create_observers",
    "ConsoleSink",
    "FileSink",
    "MemorySink",
    "NullSink",
    "create_sink",
]
