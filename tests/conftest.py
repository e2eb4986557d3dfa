"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from number_pipeline.adapters.memory_source import InMemoryNumberSource
from number_pipeline.adapters.metrics_collector import InMemoryMetricsCollector
from number_pipeline.adapters.sinks import MemorySink
from number_pipeline.registry.defaults import create_default_registry
from number_pipeline.registry.filter_registry import FilterRegistry

from tests.fixtures import RecordingObserver


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory with input files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def numbers_file(fixtures_dir: Path) -> Path:
    """File containing 1 2 3 4 5 6."""
    return fixtures_dir / "numbers.txt"


@pytest.fixture
def mixed_file(fixtures_dir: Path) -> Path:
    """File containing 3 4 5 6 7, one per line."""
    return fixtures_dir / "mixed.txt"


@pytest.fixture
def registry() -> FilterRegistry:
    """Fresh registry with the built-in filters."""
    return create_default_registry()


@pytest.fixture
def memory_source() -> InMemoryNumberSource:
    """In-memory source with a few named sequences."""
    return InMemoryNumberSource(
        {
            "one_to_six": [1, 2, 3, 4, 5, 6],
            "mixed": [3, 4, 5, 6, 7],
            "empty": [],
            "negatives": [-4, -3, -2, -1, 0],
        }
    )


@pytest.fixture
def memory_sink() -> MemorySink:
    """Sink collecting output lines."""
    return MemorySink()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def journal() -> List[Tuple[str, str, object]]:
    """Shared call journal for recording observers."""
    return []


@pytest.fixture
def recording_observers(journal) -> List[RecordingObserver]:
    """Two recording observers writing to the same journal."""
    return [RecordingObserver("first", journal), RecordingObserver("second", journal)]
