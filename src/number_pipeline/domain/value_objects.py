"""
Value Objects.

Immutable results passed between the source, the pipeline and callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from number_pipeline.domain.errors import SourceUnavailable


@dataclass(frozen=True)
class ReadResult:
    """Numbers produced by a source, plus the reason if it had none to give."""

    numbers: List[int] = field(default_factory=list)
    error: Optional[SourceUnavailable] = None

    @property
    def is_available(self) -> bool:
        return self.error is None

    @classmethod
    def unavailable(cls, identifier: str, reason: str = "") -> ReadResult:
        """Empty result carrying a SourceUnavailable condition."""
        return cls(numbers=[], error=SourceUnavailable(identifier, reason))


class RunStatus(str, Enum):
    """Outcome of a single pipeline run."""

    COMPLETED = "COMPLETED"
    DEGRADED = "DEGRADED"  # Source unavailable, ran over zero numbers
    FAILED = "FAILED"  # Filter could not be resolved, nothing ran


_EXIT_CODES = {
    RunStatus.COMPLETED: 0,
    RunStatus.FAILED: 1,
    RunStatus.DEGRADED: 3,
}


class RunResult(BaseModel):
    """Summary of a pipeline run."""

    status: RunStatus
    filter_name: str
    source_identifier: str
    numbers_read: int = Field(default=0, ge=0)
    numbers_passed: int = Field(default=0, ge=0)
    error: Optional[str] = Field(
        default=None, description="Human-readable error or degradation reason"
    )
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 completed, 1 failed, 3 source unavailable."""
        return _EXIT_CODES[self.status]

    @property
    def pass_ratio(self) -> float:
        """Fraction of read numbers that passed (0.0 when nothing was read)."""
        if self.numbers_read == 0:
            return 0.0
        return self.numbers_passed / self.numbers_read
