"""
Integration Test: Pipeline with FilterRegistry.

Tests:
    - Filter resolution before any read
    - Real observers writing to a sink
    - File source end to end
    - Idempotence with fresh observers
    - Runtime registration of new filter kinds
"""

from __future__ import annotations

import doctest
import logging
import sys
from pathlib import Path
from typing import List

import pytest

import number_pipeline
from number_pipeline.adapters.file_source import FileNumberSource
from number_pipeline.adapters.memory_source import InMemoryNumberSource
from number_pipeline.adapters.metrics_collector import InMemoryMetricsCollector
from number_pipeline.adapters.observers import CountObserver, PrintObserver, create_observers
from number_pipeline.adapters.sinks import MemorySink
from number_pipeline.domain.value_objects import RunStatus
from number_pipeline.filters.threshold import parse_threshold
from number_pipeline.observability.run_logger import RunLogger
from number_pipeline.pipeline.number_pipeline import execute
from number_pipeline.registry.filter_registry import FilterRegistry

from tests.fixtures import RecordingObserver


class TestExecuteScenarios:
    """End-to-end runs through the default registry."""

    def test_gt3_over_one_to_six(self, registry: FilterRegistry, numbers_file: Path, memory_sink: MemorySink) -> None:
        """
        SCENARIO: [1..6] with "GT3", printer then counter
        EXPECTED: Printer emits 4, 5, 6 in order; counter reports 3
        """
        printer = PrintObserver(memory_sink)
        counter = CountObserver(memory_sink)

        result = execute(registry, "GT3", FileNumberSource(), str(numbers_file), [printer, counter])

        assert result.status == RunStatus.COMPLETED
        assert counter.count == 3
        assert memory_sink.lines == [
            "Number passed: 4",
            "Number passed: 5",
            "Number passed: 6",
            "Processing finished.",
            "Total passed numbers: 3",
        ]

    def test_even_over_mixed(self, registry: FilterRegistry, mixed_file: Path, journal) -> None:
        """
        SCENARIO: [3, 4, 5, 6, 7] with "EVEN"
        EXPECTED: on_number(4), on_number(6), then on_finished
        """
        observer = RecordingObserver("only", journal)

        execute(registry, "EVEN", FileNumberSource(), str(mixed_file), [observer])

        assert journal == [
            ("only", "on_number", 4),
            ("only", "on_number", 6),
            ("only", "on_finished", None),
        ]

    def test_empty_input_counter_reports_zero(self, registry: FilterRegistry, memory_source: InMemoryNumberSource, memory_sink: MemorySink) -> None:
        """Empty input: one completion line per observer, count 0."""
        observers = create_observers(["printer", "counter"], memory_sink)

        result = execute(registry, "ODD", memory_source, "empty", observers)

        assert result.numbers_passed == 0
        assert memory_sink.lines == ["Processing finished.", "Total passed numbers: 0"]

    def test_missing_file_degrades(self, registry: FilterRegistry, tmp_path: Path, memory_sink: MemorySink) -> None:
        """
        SCENARIO: Source file does not exist
        EXPECTED: No crash, completion lines still written, non-zero exit code
        """
        observers = create_observers(["printer", "counter"], memory_sink)

        result = execute(registry, "EVEN", FileNumberSource(), str(tmp_path / "nope.txt"), observers)

        assert result.status == RunStatus.DEGRADED
        assert result.exit_code == 3
        assert memory_sink.lines == ["Processing finished.", "Total passed numbers: 0"]

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits") or sys.get_int_max_str_digits() == 0,
        reason="interpreter has no int conversion limit",
    )
    def test_oversized_token_keeps_numbers_before_it(self, registry: FilterRegistry, tmp_path: Path, memory_sink: MemorySink) -> None:
        """
        SCENARIO: File "1 2 <too many digits> 4" with "EVEN"
        EXPECTED: Run completes over [1, 2], no exception escapes execute
        """
        path = tmp_path / "huge.txt"
        path.write_text("1 2 " + "9" * (sys.get_int_max_str_digits() + 700) + " 4")
        observers = create_observers(["printer", "counter"], memory_sink)

        result = execute(registry, "EVEN", FileNumberSource(), str(path), observers)

        assert result.status == RunStatus.COMPLETED
        assert result.numbers_read == 2
        assert memory_sink.lines == [
            "Number passed: 2",
            "Processing finished.",
            "Total passed numbers: 1",
        ]

    def test_idempotent_with_fresh_observers(self, registry: FilterRegistry, numbers_file: Path) -> None:
        """
        SCENARIO: Same filter and source twice, fresh observers each time
        EXPECTED: Identical call sequences and output
        """
        outputs: List[List[str]] = []
        journals: List[list] = []
        for _ in range(2):
            sink = MemorySink()
            journal: list = []
            observers = create_observers(["printer", "counter"], sink) + [RecordingObserver("rec", journal)]
            execute(registry, "GT3", FileNumberSource(), str(numbers_file), observers)
            outputs.append(sink.lines)
            journals.append(journal)

        assert outputs[0] == outputs[1]
        assert journals[0] == journals[1]


class TestExecuteFailures:
    """Registry errors end the run before the source is read."""

    @pytest.mark.parametrize("name", ["PRIME", "GT", "GTx", "even", "ODD1"])
    def test_unresolvable_filter_fails_without_reading(self, registry: FilterRegistry, memory_source: InMemoryNumberSource, recording_observers, journal, name: str) -> None:
        """
        SCENARIO: Unknown name or bad parameter
        EXPECTED: FAILED, exit code 1, no read, no observer calls
        """
        result = execute(registry, name, memory_source, "one_to_six", recording_observers)

        assert result.status == RunStatus.FAILED
        assert result.exit_code == 1
        assert result.numbers_read == 0
        assert memory_source.read_calls == []
        assert journal == []

    def test_no_match_error_message(self, registry: FilterRegistry, memory_source: InMemoryNumberSource) -> None:
        """Unknown filter is reported with its name."""
        result = execute(registry, "PRIME", memory_source, "one_to_six", [])

        assert result.error == "Unknown filter: PRIME"
        assert result.metadata["error_type"] == "RegistryNoMatch"

    def test_construction_error_type(self, registry: FilterRegistry, memory_source: InMemoryNumberSource) -> None:
        """Bad parameter is reported as ConstructionError."""
        result = execute(registry, "GT", memory_source, "one_to_six", [])

        assert result.metadata["error_type"] == "ConstructionError"
        assert "missing numeric threshold" in result.error

    def test_failure_is_logged(self, registry: FilterRegistry, memory_source: InMemoryNumberSource) -> None:
        """Rejected filters produce a filter_rejected event and no run events."""
        run_logger = RunLogger(log_level=logging.CRITICAL)

        execute(registry, "NOPE", memory_source, "one_to_six", [], run_logger=run_logger)

        assert [e["event_type"] for e in run_logger.get_events()] == ["filter_rejected"]


class TestRuntimeExtension:
    """New filter kinds registered at runtime."""

    def test_registered_filter_is_usable(self, registry: FilterRegistry, memory_source: InMemoryNumberSource, journal) -> None:
        """
        SCENARIO: Register "LT" at runtime
        EXPECTED: "LT3" works through execute without touching dispatch code
        """

        class LessThanFilter:
            def __init__(self, threshold: int) -> None:
                self.threshold = threshold

            @property
            def name(self) -> str:
                return f"LT{self.threshold}"

            def keep(self, number: int) -> bool:
                return number < self.threshold

        registry.register("LT", lambda residual: LessThanFilter(parse_threshold(residual)))
        observer = RecordingObserver("rec", journal)

        result = execute(registry, "LT3", memory_source, "one_to_six", [observer])

        assert observer.numbers == [1, 2]
        assert result.filter_name == "LT3"

    def test_full_observability_stack(self, registry: FilterRegistry, memory_source: InMemoryNumberSource) -> None:
        """Metrics and events share one run."""
        metrics = InMemoryMetricsCollector()
        run_logger = RunLogger(log_level=logging.CRITICAL)

        result = execute(
            registry, "EVEN", memory_source, "one_to_six", [],
            metrics_collector=metrics, run_logger=run_logger,
        )

        assert [e["event_type"] for e in run_logger.get_events()] == [
            "filter_resolved",
            "run_started",
            "run_finished",
        ]
        correlation_ids = {e["correlation_id"] for e in run_logger.get_events()}
        assert correlation_ids == {result.metadata["correlation_id"]}
        assert metrics.get_metrics()["numbers_passed_total"]["last"] == 3


class TestPackageExample:
    """The usage example in the package docstring."""

    def test_package_docstring_example_runs(self, fixtures_dir: Path, monkeypatch) -> None:
        """
        SCENARIO: Run the package docstring example next to numbers.txt
        EXPECTED: Every example line runs and prints what it shows
        """
        monkeypatch.chdir(fixtures_dir)
        runner = doctest.DocTestRunner()

        for example in doctest.DocTestFinder(recurse=False).find(number_pipeline):
            runner.run(example)

        assert runner.tries > 0
        assert runner.failures == 0
