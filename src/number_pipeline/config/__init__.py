"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - PipelineConfig: Root configuration object
    - SinkConfig: Output sink for observers
    - LoggingConfig: Diagnostic logging level and format

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Command-line values override file values
"""

from number_pipeline.config.loader import ConfigLoader, load_config
from number_pipeline.config.models import LoggingConfig, PipelineConfig, SinkConfig

__all__ = [
    "ConfigLoader",
    "load_config",
    "LoggingConfig",
    "PipelineConfig",
    "SinkConfig",
]
