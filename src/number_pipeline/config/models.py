"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel, Field, field_validator

from number_pipeline.adapters.observers import OBSERVER_FACTORIES
from number_pipeline.adapters.sinks import normalize_sink_type


class SinkConfig(BaseModel):
    """Where observer output goes."""

    type: str = Field(default="console", description="console, file or none")
    path: str = Field(default="app.log", description="Target for the file sink")

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        return normalize_sink_type(value)


class LoggingConfig(BaseModel):
    """Diagnostic logging settings."""

    level: str = Field(default="WARNING")
    json_output: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class PipelineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    observers: List[str] = Field(default_factory=lambda: ["printer", "counter"])
    sink: SinkConfig = Field(default_factory=SinkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("observers")
    @classmethod
    def _check_observers(cls, value: List[str]) -> List[str]:
        names = [name.strip().lower() for name in value]
        unknown = [name for name in names if name not in OBSERVER_FACTORIES]
        if unknown:
            raise ValueError(f"Unknown observers: {unknown}")
        return names
