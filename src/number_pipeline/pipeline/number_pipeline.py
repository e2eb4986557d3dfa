"""
Number Pipeline - Main Orchestrator.

The NumberPipeline wires one source, one filter and an ordered list of
observers for a run:

    1. Read all numbers from the source
    2. For each number that passes the filter, notify every observer in order
    3. Notify every observer that the input is finished

execute() adds the step before that: resolving the filter name through a
FilterRegistry. A name that cannot be resolved fails the run before the
source is touched.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, Sequence

from number_pipeline import __version__
from number_pipeline.domain.errors import RegistryError
from number_pipeline.domain.value_objects import RunResult, RunStatus
from number_pipeline.interfaces.number_filter import NumberFilter
from number_pipeline.interfaces.number_observer import NumberObserver
from number_pipeline.interfaces.number_source import NumberSource

logger = logging.getLogger(__name__)


class FilterFactoryProtocol(Protocol):
    """Anything that builds a filter from a name (usually a FilterRegistry)."""

    def create(self, name: str) -> NumberFilter:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Dict[str, Any]]:
        ...


class RunLoggerProtocol(Protocol):
    """Protocol for structured run loggers."""

    def start_run(self) -> str:
        ...

    def log_event(
        self, event_type: str, data: Optional[Dict[str, Any]] = None, level: str = "info"
    ) -> None:
        ...


class NumberPipeline:
    """Runs one source through one filter into a list of observers."""

    def __init__(
        self,
        source: NumberSource,
        number_filter: NumberFilter,
        observers: Sequence[NumberObserver],
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
        run_logger: Optional[RunLoggerProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        The pipeline borrows its collaborators. Observer state is never
        reset here; pass fresh observers for a fresh count.

        Args:
            source: Where numbers come from
            number_filter: Predicate applied to each number
            observers: Notified in this order
            metrics_collector: For run metrics (optional)
            run_logger: For structured run events (optional)
        """
        self.source = source
        self.number_filter = number_filter
        self.observers: List[NumberObserver] = list(observers)
        self.metrics_collector = metrics_collector
        self.run_logger = run_logger

    def run(self, identifier: str, correlation_id: Optional[str] = None) -> RunResult:
        """
        Execute one run over the input behind ``identifier``.

        Args:
            identifier: Source identifier, e.g. a file path
            correlation_id: Reuse an existing run ID (set by execute())

        Returns:
            RunResult with COMPLETED, or DEGRADED if the source was unavailable
        """
        start_time = time.perf_counter()
        if correlation_id is None and self.run_logger:
            correlation_id = self.run_logger.start_run()
        filter_name = getattr(self.number_filter, "name", type(self.number_filter).__name__)

        self._log_event(
            "run_started", {"filter": filter_name, "source": identifier}
        )

        # 1. Read
        read_result = self.source.read(identifier)
        if read_result.error is not None:
            logger.warning(f"{read_result.error}; running over zero numbers")
            self._log_event(
                "source_unavailable",
                {"source": identifier, "reason": read_result.error.reason},
                level="warning",
            )

        # 2. Filter and notify
        passed = 0
        for number in read_result.numbers:
            if self.number_filter.keep(number):
                passed += 1
                for observer in self.observers:
                    observer.on_number(number)

        # 3. Completion
        for observer in self.observers:
            observer.on_finished()

        duration = time.perf_counter() - start_time
        status = RunStatus.COMPLETED if read_result.is_available else RunStatus.DEGRADED
        metrics = self._record_metrics(
            len(read_result.numbers), passed, duration, filter_name
        )
        finished: Dict[str, Any] = {
            "status": status.value,
            "numbers_read": len(read_result.numbers),
            "numbers_passed": passed,
            "duration_seconds": round(duration, 6),
        }
        if metrics is not None:
            finished["metrics"] = metrics
        self._log_event("run_finished", finished)
        logger.info(
            f"Run finished ({status.value}): {passed}/{len(read_result.numbers)} "
            f"numbers passed {filter_name}"
        )

        return RunResult(
            status=status,
            filter_name=filter_name,
            source_identifier=identifier,
            numbers_read=len(read_result.numbers),
            numbers_passed=passed,
            error=str(read_result.error) if read_result.error else None,
            metadata=self._build_metadata(correlation_id, duration, metrics),
        )

    def _record_metrics(
        self, read: int, passed: int, duration: float, filter_name: str
    ) -> Optional[Dict[str, Dict[str, Any]]]:
        """Record this run and return the collector's summary."""
        if not self.metrics_collector:
            return None
        tags = {"filter": filter_name}
        self.metrics_collector.record_count("numbers_read_total", read, tags)
        self.metrics_collector.record_count("numbers_passed_total", passed, tags)
        self.metrics_collector.record_timing("run_duration_seconds", duration, tags)
        return self.metrics_collector.get_metrics()

    def _log_event(
        self, event_type: str, data: Dict[str, Any], level: str = "info"
    ) -> None:
        if self.run_logger:
            self.run_logger.log_event(event_type, data, level=level)

    def _build_metadata(
        self,
        correlation_id: Optional[str],
        duration: float,
        metrics: Optional[Dict[str, Dict[str, Any]]],
    ) -> dict:
        metadata = {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": __version__,
        }
        if metrics is not None:
            metadata["metrics"] = metrics
        return metadata


def execute(
    registry: FilterFactoryProtocol,
    filter_name: str,
    source: NumberSource,
    identifier: str,
    observers: Sequence[NumberObserver],
    metrics_collector: Optional[MetricsCollectorProtocol] = None,
    run_logger: Optional[RunLoggerProtocol] = None,
) -> RunResult:
    """
    Resolve a filter by name and run the pipeline.

    Registry errors do not propagate: they produce a FAILED RunResult and
    neither the source nor any observer is called.

    Args:
        registry: Builds the filter from its name
        filter_name: Filter name, e.g. "GT5"
        source: Number source
        identifier: Source identifier
        observers: Observers in notification order
        metrics_collector: Optional metrics collector
        run_logger: Optional structured run logger

    Returns:
        RunResult of the run
    """
    correlation_id = run_logger.start_run() if run_logger else None

    try:
        number_filter = registry.create(filter_name)
    except RegistryError as e:
        logger.error(str(e))
        if run_logger:
            run_logger.log_event(
                "filter_rejected",
                {"filter": filter_name, "error": type(e).__name__, "reason": str(e)},
                level="error",
            )
        return RunResult(
            status=RunStatus.FAILED,
            filter_name=filter_name,
            source_identifier=identifier,
            error=str(e),
            metadata={
                "correlation_id": correlation_id,
                "timestamp": datetime.now().isoformat(),
                "error_type": type(e).__name__,
                "version": __version__,
            },
        )

    logger.debug(f"Filter '{filter_name}' resolved to {number_filter!r}")
    if run_logger:
        run_logger.log_event(
            "filter_resolved", {"filter": filter_name, "resolved": repr(number_filter)}
        )

    pipeline = NumberPipeline(
        source=source,
        number_filter=number_filter,
        observers=observers,
        metrics_collector=metrics_collector,
        run_logger=run_logger,
    )
    return pipeline.run(identifier, correlation_id=correlation_id)
