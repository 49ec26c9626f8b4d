"""Diagnostics sinks."""

from .base import DiagnosticsSink
from .in_memory import InMemoryDiagnosticsSink

__all__ = ["DiagnosticsSink", "InMemoryDiagnosticsSink"]
