"""
Pipeline Errors.

Error taxonomy:
    - SourceUnavailable: recoverable, the run continues with no numbers
    - RegistryNoMatch: no registered prefix matches the filter name
    - ConstructionError: the matched constructor rejected its parameter
    - ConfigError: configuration could not be loaded

Registry errors are raised before any number is read and end the run.
"""

from __future__ import annotations

from typing import Optional, Sequence


class NumberPipelineError(Exception):
    """Base class for all pipeline errors."""
    pass


class SourceUnavailable(NumberPipelineError):
    """
    Input for a source could not be read.

    Sources return this inside a ReadResult instead of raising it.
    """

    def __init__(self, identifier: str, reason: str = "") -> None:
        self.identifier = identifier
        self.reason = reason
        message = f"Source unavailable: {identifier}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RegistryError(NumberPipelineError):
    """Filter name could not be turned into a filter."""
    pass


class RegistryNoMatch(RegistryError):
    """No registered prefix matches the filter name."""

    def __init__(self, name: str, known_prefixes: Optional[Sequence[str]] = None) -> None:
        self.name = name
        self.known_prefixes = list(known_prefixes or [])
        super().__init__(f"Unknown filter: {name}")


class ConstructionError(RegistryError):
    """A filter constructor rejected its residual parameter."""

    def __init__(self, reason: str, name: str = "", residual: str = "") -> None:
        self.name = name
        self.residual = residual
        self.reason = reason
        if name:
            super().__init__(f"Cannot build filter '{name}': {reason}")
        else:
            super().__init__(reason)


class ConfigError(NumberPipelineError):
    """Configuration file is missing or invalid."""
    pass
