"""
Domain Layer - Errors and Value Objects.

This package contains the core types the pipeline operates on. It has no
dependencies on other layers of the application.

Components:
    - errors: Exception hierarchy (SourceUnavailable, RegistryError, ...)
    - value_objects: ReadResult, RunResult, RunStatus
"""

from number_pipeline.domain.errors import (
    ConfigError,
    ConstructionError,
    NumberPipelineError,
    RegistryError,
    RegistryNoMatch,
    SourceUnavailable,
)
from number_pipeline.domain.value_objects import ReadResult, RunResult, RunStatus

__all__ = [
    "ConfigError",
    "ConstructionError",
    "NumberPipelineError",
    "RegistryError",
    "RegistryNoMatch",
    "SourceUnavailable",
    "ReadResult",
    "RunResult",
    "RunStatus",
]
