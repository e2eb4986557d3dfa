"""
Number Filter Protocol.

Defines the abstract interface for filters and for the constructors the
FilterRegistry stores.

Design Notes:
    - Filters are stateless apart from construction parameters
    - keep() must be total over all integers
    - Constructors receive the residual of the filter name ("5" for "GT5")
      and raise ValueError or ConstructionError on a bad residual
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class NumberFilter(Protocol):
    """Abstract interface for number filters."""

    @property
    def name(self) -> str:
        """Display name of this filter (e.g. "GT5")."""
        ...

    def keep(self, number: int) -> bool:
        """Return True if the number passes the filter."""
        ...


FilterConstructor = Callable[[str], NumberFilter]
