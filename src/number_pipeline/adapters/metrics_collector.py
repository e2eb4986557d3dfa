"""
Run Metrics Collector.

Aggregates the numbers a pipeline run reports (numbers read, numbers
passed, run duration) into one summary per metric name. The summary is
what ends up in the ``run_finished`` event and the RunResult metadata.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from threading import Lock
from typing import Any, Dict, Optional, Union

Number = Union[int, float]


@dataclass
class MetricSummary:
    """Running aggregate for one metric name."""

    kind: str
    count: int = 0
    total: Number = 0
    last: Number = 0
    tags: Dict[str, str] = field(default_factory=dict)

    def add(self, value: Number, tags: Optional[Dict[str, str]]) -> None:
        self.count += 1
        self.total += value
        self.last = value
        if tags:
            self.tags = dict(tags)


class InMemoryMetricsCollector:
    """Keeps one MetricSummary per name, across any number of runs."""

    def __init__(self) -> None:
        self._summaries: Dict[str, MetricSummary] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Add a duration in seconds."""
        self._add(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Add a count."""
        self._add(name, "count", value, tags)

    def summary(self, name: str) -> Optional[MetricSummary]:
        """Aggregate for ``name``, or None if it was never recorded."""
        with self._lock:
            return self._summaries.get(name)

    def get_metrics(self) -> Dict[str, Dict[str, Any]]:
        """All aggregates as plain dicts (count, total, last per name)."""
        with self._lock:
            return {
                name: {"count": s.count, "total": s.total, "last": s.last}
                for name, s in self._summaries.items()
            }

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """All aggregates including kind and tags."""
        with self._lock:
            return {name: asdict(s) for name, s in self._summaries.items()}

    def clear(self) -> None:
        with self._lock:
            self._summaries.clear()

    def _add(
        self,
        name: str,
        kind: str,
        value: Number,
        tags: Optional[Dict[str, str]],
    ) -> None:
        with self._lock:
            summary = self._summaries.get(name)
            if summary is None:
                summary = self._summaries[name] = MetricSummary(kind=kind)
            elif summary.kind != kind:
                raise ValueError(
                    f"Metric '{name}' is a {summary.kind}, cannot record a {kind}"
                )
            summary.add(value, tags)
