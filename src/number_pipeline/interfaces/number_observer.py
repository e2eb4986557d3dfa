"""
Number Observer Protocol.

Observers are notified of every number that passes the filter and once
more when the input is exhausted.

Design Notes:
    - Notification order is the pipeline's observer list order
    - on_finished() is called exactly once per run, even with zero numbers
    - Observers may keep state; the pipeline never resets it
    - Observers are expected not to raise
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NumberObserver(Protocol):
    """Abstract interface for number observers."""

    def on_number(self, number: int) -> None:
        """Handle a number that passed the filter."""
        ...

    def on_finished(self) -> None:
        """Handle the end of the input."""
        ...
