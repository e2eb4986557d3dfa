"""
Output Sink Protocol.

Line-oriented output target used by observers. Formatting of the message
is the observer's job; the sink only decides where the line goes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Abstract interface for output sinks."""

    def write_line(self, message: str) -> None:
        """Write one line of output."""
        ...
