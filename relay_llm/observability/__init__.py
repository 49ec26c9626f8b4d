"""Observability layer.

This layer handles:
- Structured, leveled diagnostics for every component
- Pluggable sinks so hosts and tests can inspect emitted events
"""

from .logging import DiagnosticEvent, Diagnostics
from .sinks import DiagnosticsSink, InMemoryDiagnosticsSink

__all__ = [
    "DiagnosticEvent",
    "Diagnostics",
    "DiagnosticsSink",
    "InMemoryDiagnosticsSink",
]
