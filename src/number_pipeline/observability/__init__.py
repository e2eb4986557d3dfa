"""
Observability Package - Structured Run Logging.

Components:
    - RunLogger: structlog-based event logger with correlation IDs
"""

from number_pipeline.observability.run_logger import (
    RunLogger,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "RunLogger",
    "get_correlation_id",
    "set_correlation_id",
]
