"""
Number Pipeline - Extensible Integer Filtering.

Reads a sequence of integers from a source, applies a single filter that is
selected by name at runtime, and forwards every passing number to a list of
observers. Observers are told once more when the stream is exhausted.

Architecture:
    - Ports & Adapters: sources, filters, observers and sinks are Protocols
    - Prefix-keyed FilterRegistry for open-ended filter kinds ("GT5")
    - Dependency Injection: no global registry, everything passed in
    - Configuration-driven observers and output sink via YAML

Main Components:
    - domain: Errors and value objects (ReadResult, RunResult)
    - interfaces: Protocols for sources, filters, observers, sinks
    - filters: Concrete filters (even, odd, greater-than)
    - registry: FilterRegistry and the default registrations
    - pipeline: NumberPipeline orchestration
    - adapters: File/in-memory sources, sinks, observers, metrics
    - config: Configuration models and loaders
    - observability: Structured run event logging

Example:
    >>> from number_pipeline.adapters import ConsoleSink, FileNumberSource, create_observers
    >>> from number_pipeline.registry import create_default_registry
    >>> from number_pipeline.pipeline import execute
    >>> registry = create_default_registry()
    >>> observers = create_observers(["printer", "counter"], ConsoleSink())
    >>> result = execute(registry, "GT3", FileNumberSource(), "numbers.txt", observers)
    Number passed: 4
    Number passed: 5
    Number passed: 6
    Processing finished.
    Total passed numbers: 3
    >>> print(f"{result.numbers_passed} numbers passed")
    3 numbers passed

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Number Pipeline.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import number_pipeline
        >>> number_pipeline.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("number_pipeline").setLevel(level)
