"""Base interface for diagnostics sinks."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..logging import DiagnosticEvent


class DiagnosticsSink(Protocol):
    """Protocol for diagnostics sink implementations."""

    def record(self, event: "DiagnosticEvent") -> None:
        """Record a diagnostic event."""
        ...
