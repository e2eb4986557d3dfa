"""
Run Logger - Structured Events for Pipeline Runs.

Provides:
    - Structured logging via structlog (JSON or console rendering)
    - Correlation ID per run, bound through structlog contextvars
    - In-memory event history for inspection and tests

Design Notes:
    - Events go to stderr by default so they never mix with observer output
    - The logger is built with wrap_logger, global structlog config is untouched
"""

from __future__ import annotations

import logging
import sys
import threading
import uuid
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, List, Optional, TextIO

import structlog

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


class RunLogger:
    """
    Structured event logger for pipeline runs.

    Every event is rendered through structlog and kept in memory.
    """

    def __init__(
        self,
        service_name: str = "number_pipeline",
        use_json: bool = False,
        log_level: int = logging.INFO,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize run logger.

        Args:
            service_name: Service name added to each event
            use_json: Render JSON lines instead of console output
            log_level: Minimum level rendered
            stream: Output stream (default: stderr)
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

        processors: List[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))

        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=stream or sys.stderr),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
        ).bind(service=service_name)

    def start_run(self) -> str:
        """Generate and bind a new correlation ID for a run."""
        correlation_id = str(uuid.uuid4())
        set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log a structured event.

        Args:
            event_type: Type of event (e.g., "run_started", "filter_resolved")
            data: Additional event data
            level: Log level (debug, info, warning, error)
        """
        event_data = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            "level": level.lower(),
            **(data or {}),
        }

        with self._lock:
            self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        log_method(event_type, **(data or {}))

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get recorded events, optionally of one type."""
        with self._lock:
            if event_type is None:
                return list(self._events)
            return [e for e in self._events if e["event_type"] == event_type]

    def clear(self) -> None:
        """Clear recorded events."""
        with self._lock:
            self._events.clear()
