"""
Output Sinks.

Line-oriented destinations for observer output:
    - ConsoleSink: standard output
    - FileSink: appends to a file
    - NullSink: discards everything
    - MemorySink: keeps lines in a list (tests, embedding)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from number_pipeline.interfaces.output_sink import OutputSink

logger = logging.getLogger(__name__)

SINK_TYPES = ("console", "file", "none")


class ConsoleSink:
    """Write lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write_line(self, message: str) -> None:
        stream = self._stream or sys.stdout
        print(message, file=stream)


class FileSink:
    """Append lines to a file."""

    def __init__(self, path: Union[str, Path] = "app.log") -> None:
        """
        Initialize file sink.

        Args:
            path: File to append to, created on first write
        """
        self.path = Path(path)

    def write_line(self, message: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{message}\n")
        except OSError as e:
            logger.error(f"Cannot write to {self.path}: {e}")


class NullSink:
    """Discard all output."""

    def write_line(self, message: str) -> None:
        pass


class MemorySink:
    """Collect lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write_line(self, message: str) -> None:
        self.lines.append(message)

    def clear(self) -> None:
        self.lines.clear()


def normalize_sink_type(sink_type: str) -> str:
    """
    Normalize a sink type name.

    Unknown names fall back to "console" with a warning.
    """
    normalized = sink_type.strip().lower()
    if normalized not in SINK_TYPES:
        logger.warning(f"Unknown sink type: {sink_type}. Falling back to console.")
        return "console"
    return normalized


def create_sink(sink_type: str = "console", path: Union[str, Path] = "app.log") -> OutputSink:
    """
    Create a sink by type name.

    Args:
        sink_type: "console", "file" or "none" (case-insensitive)
        path: Target file for the "file" sink

    Returns:
        OutputSink instance
    """
    normalized = normalize_sink_type(sink_type)
    if normalized == "file":
        sink: OutputSink = FileSink(path)
    elif normalized == "none":
        sink = NullSink()
    else:
        sink = ConsoleSink()
    logger.debug(f"Sink set to {normalized}")
    return sink
