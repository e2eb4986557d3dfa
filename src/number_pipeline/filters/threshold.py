"""
Threshold Filter Implementation.

Passes numbers strictly greater than a fixed threshold. The threshold is
parsed from the residual of a filter name, so "GT5" becomes
GreaterThanFilter(5).
"""

from __future__ import annotations

import re

from number_pipeline.domain.errors import ConstructionError

# Optional sign followed by ASCII digits. int() alone would also accept
# surrounding whitespace and "1_000".
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_threshold(residual: str) -> int:
    """
    Parse a threshold parameter.

    Args:
        residual: Text left after stripping the filter prefix

    Returns:
        Parsed integer threshold

    Raises:
        ConstructionError: If the residual is empty or not an integer
    """
    if not residual:
        raise ConstructionError("missing numeric threshold", residual=residual)
    if not _INTEGER_PATTERN.fullmatch(residual):
        raise ConstructionError(
            f"threshold '{residual}' is not an integer", residual=residual
        )
    return int(residual)


class GreaterThanFilter:
    """Pass numbers strictly greater than the threshold."""

    def __init__(self, threshold: int) -> None:
        """
        Initialize with threshold.

        Args:
            threshold: Numbers must be greater than this to pass
        """
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def name(self) -> str:
        return f"GT{self._threshold}"

    def keep(self, number: int) -> bool:
        return number > self._threshold

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GreaterThanFilter):
            return NotImplemented
        return self._threshold == other._threshold

    def __hash__(self) -> int:
        return hash(("GT", self._threshold))

    def __repr__(self) -> str:
        return f"GreaterThanFilter(threshold={self._threshold})"
