"""
In-Memory Number Source.

Serves fixed sequences by identifier. Useful for tests and for callers
that already hold their numbers in memory.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from number_pipeline.domain.value_objects import ReadResult


class InMemoryNumberSource:
    """Number source backed by a dictionary of sequences."""

    def __init__(self, sequences: Optional[Dict[str, Iterable[int]]] = None) -> None:
        """
        Initialize with known sequences.

        Args:
            sequences: Identifier -> numbers
        """
        self._sequences: Dict[str, List[int]] = {
            key: list(values) for key, values in (sequences or {}).items()
        }
        self.read_calls: List[str] = []

    def add(self, identifier: str, numbers: Iterable[int]) -> None:
        """Register or replace a sequence."""
        self._sequences[identifier] = list(numbers)

    def read(self, identifier: str) -> ReadResult:
        """Return a copy of the sequence, or unavailable if unknown."""
        self.read_calls.append(identifier)
        if identifier not in self._sequences:
            return ReadResult.unavailable(identifier, "unknown identifier")
        return ReadResult(numbers=list(self._sequences[identifier]))
