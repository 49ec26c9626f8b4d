"""
Structured diagnostics for adapters, the tool registry and the orchestrator.

Every event is written to the standard ``logging`` hierarchy under
``relay_llm.<component>`` with ``key=value`` fields, and fanned out to any
attached sinks so callers and tests can inspect what happened without
scraping console output.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .sinks.base import DiagnosticsSink


@dataclass
class DiagnosticEvent:
    """A single leveled diagnostic record."""
    name: str
    level: int
    message: str
    component: str
    fields: Dict[str, Any] = field(default_factory=dict)
    error: Optional[Exception] = None
    timestamp: float = field(default_factory=time.time)

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)


class Diagnostics:
    """Structured logger shared by one component and its children."""

    def __init__(self, component: str, sinks: Optional[List[DiagnosticsSink]] = None):
        """
        Initialize diagnostics for a component.

        Args:
            component: Dotted component name (e.g., "providers.anthropic")
            sinks: Sinks receiving every emitted event
        """
        self.component = component
        self.logger = logging.getLogger(f"relay_llm.{component}")
        self._sinks: List[DiagnosticsSink] = sinks if sinks is not None else []

    def child(self, component: str) -> "Diagnostics":
        """Diagnostics for a sub-component that share this instance's sinks."""
        return Diagnostics(component, self._sinks)

    def add_sink(self, sink: DiagnosticsSink) -> None:
        self._sinks.append(sink)

    def remove_sink(self, sink: DiagnosticsSink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]
        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")
        return f"[{' '.join(fields)}] {message}"

    def emit(self, level: int, event: str, message: str,
             error: Optional[Exception] = None, **kwargs) -> DiagnosticEvent:
        if error is not None:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        record = DiagnosticEvent(
            name=event,
            level=level,
            message=message,
            component=self.component,
            fields={k: v for k, v in kwargs.items() if v is not None},
            error=error,
        )
        self.logger.log(level, self._format_message(message, event=event, **kwargs))
        for sink in list(self._sinks):
            sink.record(record)
        return record

    def debug(self, event: str, message: str, **kwargs) -> DiagnosticEvent:
        return self.emit(logging.DEBUG, event, message, **kwargs)

    def info(self, event: str, message: str, **kwargs) -> DiagnosticEvent:
        return self.emit(logging.INFO, event, message, **kwargs)

    def warning(self, event: str, message: str,
                error: Optional[Exception] = None, **kwargs) -> DiagnosticEvent:
        return self.emit(logging.WARNING, event, message, error=error, **kwargs)

    def error(self, event: str, message: str,
              error: Optional[Exception] = None, **kwargs) -> DiagnosticEvent:
        return self.emit(logging.ERROR, event, message, error=error, **kwargs)

    @contextmanager
    def track_request(self, method: str, model: str, request_id: Optional[str] = None):
        """
        Context manager to track request timing and log key events.

        Args:
            method: The method being called (e.g., "generate")
            model: The model being used
            request_id: Optional request ID (generated if not provided)

        Yields:
            Dict with request metadata including request_id
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()
        self.debug(
            "provider.request",
            f"Starting {method} request",
            model=model,
            request_id=request_id,
            method=method,
        )

        metadata = {
            'request_id': request_id,
            'model': model,
            'method': method,
            'start_time': start_time,
        }

        try:
            yield metadata
        except Exception as e:
            self.error(
                "provider.request_failed",
                f"Failed {method} request",
                model=model,
                request_id=request_id,
                duration_ms=int((time.time() - start_time) * 1000),
                error=e,
            )
            raise

        self.debug(
            "provider.response",
            f"Completed {method} request",
            model=model,
            request_id=request_id,
            method=method,
            outcome=metadata.get('outcome'),
            duration_ms=int((time.time() - start_time) * 1000),
        )

    def log_usage(self, usage: Dict[str, Any], model: str, request_id: str) -> None:
        """Log token usage information."""
        self.debug(
            "provider.usage",
            "Token usage",
            model=model,
            request_id=request_id,
            prompt_tokens=usage.get('prompt_tokens', 0),
            completion_tokens=usage.get('completion_tokens', 0),
            total_tokens=usage.get('total_tokens', 0),
        )
