"""
Test Fixtures - Shared Test Data and Helpers.

This package contains reusable test fixtures:
    - numbers.txt: 1 2 3 4 5 6 on one line
    - mixed.txt: 3 4 5 6 7, one number per line
    - RecordingObserver: observer that journals every call

Usage:
    Import helpers directly, data files through the conftest fixtures.
"""

from __future__ import annotations

from typing import List, Tuple


class RecordingObserver:
    """Observer that appends every call to a (possibly shared) journal."""

    def __init__(self, label: str, journal: List[Tuple[str, str, object]]) -> None:
        self.label = label
        self.journal = journal
        self.numbers: List[int] = []
        self.finished_calls = 0

    def on_number(self, number: int) -> None:
        self.numbers.append(number)
        self.journal.append((self.label, "on_number", number))

    def on_finished(self) -> None:
        self.finished_calls += 1
        self.journal.append((self.label, "on_finished", None))
