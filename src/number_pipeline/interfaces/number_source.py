"""
Number Source Protocol.

Defines the abstract interface for reading the input sequence. All sources
(file, in-memory) must implement this protocol to be used with the
pipeline.

The source is responsible for:
    - Resolving an opaque identifier to an input
    - Returning the integers in input order
    - Reporting missing input as data, not as an exception
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from number_pipeline.domain.value_objects import ReadResult


@runtime_checkable
class NumberSource(Protocol):
    """Abstract interface for number sources."""

    def read(self, identifier: str) -> ReadResult:
        """
        Read all numbers behind an identifier.

        Args:
            identifier: Opaque handle for the input (e.g. a file path)

        Returns:
            ReadResult with the numbers in input order. When the input is
            missing or unreadable, the numbers are empty and ``error`` holds
            a SourceUnavailable.
        """
        ...
