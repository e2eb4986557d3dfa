"""
Number Observers.

Observers write to an OutputSink:
    - PrintObserver: one line per passing number, one completion line
    - CountObserver: counts passing numbers, reports the total at the end
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from number_pipeline.interfaces.number_observer import NumberObserver
from number_pipeline.interfaces.output_sink import OutputSink


class PrintObserver:
    """Report every passing number."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def on_number(self, number: int) -> None:
        self._sink.write_line(f"Number passed: {number}")

    def on_finished(self) -> None:
        self._sink.write_line("Processing finished.")


class CountObserver:
    """Count passing numbers and report the total on completion."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink
        self._count = 0

    @property
    def count(self) -> int:
        """Numbers seen so far."""
        return self._count

    def on_number(self, number: int) -> None:
        self._count += 1

    def on_finished(self) -> None:
        self._sink.write_line(f"Total passed numbers: {self._count}")


OBSERVER_FACTORIES: Dict[str, Callable[[OutputSink], NumberObserver]] = {
    "printer": PrintObserver,
    "counter": CountObserver,
}


def create_observers(names: Sequence[str], sink: OutputSink) -> List[NumberObserver]:
    """
    Build observers by name, preserving order.

    Args:
        names: Observer names ("printer", "counter")
        sink: Sink shared by all observers

    Returns:
        Fresh observer instances

    Raises:
        ValueError: If a name is unknown
    """
    unknown = [n for n in names if n not in OBSERVER_FACTORIES]
    if unknown:
        raise ValueError(f"Unknown observers: {unknown}")
    return [OBSERVER_FACTORIES[name](sink) for name in names]
