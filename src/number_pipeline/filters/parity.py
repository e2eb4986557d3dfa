"""
Parity Filters.

Pass numbers by parity. Python's modulo is non-negative for a positive
divisor, so negative numbers need no special casing.
"""

from __future__ import annotations


class EvenFilter:
    """Pass even numbers."""

    @property
    def name(self) -> str:
        return "EVEN"

    def keep(self, number: int) -> bool:
        return number % 2 == 0

    def __repr__(self) -> str:
        return "EvenFilter()"


class OddFilter:
    """Pass odd numbers."""

    @property
    def name(self) -> str:
        return "ODD"

    def keep(self, number: int) -> bool:
        return number % 2 != 0

    def __repr__(self) -> str:
        return "OddFilter()"
