"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
collaborators of the pipeline. High-level modules depend on these
abstractions, not on concrete implementations.

Protocols:
    - NumberSource: Produces the integers for one run
    - NumberFilter: Predicate deciding whether a number passes
    - NumberObserver: Notified per passing number and at completion
    - OutputSink: Line-oriented output used by observers

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - All methods have clear contracts in docstrings
"""

from number_pipeline.interfaces.number_filter import FilterConstructor, NumberFilter
from number_pipeline.interfaces.number_observer import NumberObserver
from number_pipeline.interfaces.number_source import NumberSource
from number_pipeline.interfaces.output_sink import OutputSink

__all__ = [
    "FilterConstructor",
    "NumberFilter",
    "NumberObserver",
    "NumberSource",
    "OutputSink",
]
