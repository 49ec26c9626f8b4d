"""
In-memory diagnostics sink for testing and debugging.

Keeps the most recent events in a bounded buffer and lets callers filter
them by name or level.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, List, Optional

from .base import DiagnosticsSink

if TYPE_CHECKING:
    from ..logging import DiagnosticEvent


class InMemoryDiagnosticsSink(DiagnosticsSink):
    """Fixed-size buffer of diagnostic events."""

    def __init__(self, max_size: int = 10000):
        self.max_size = max_size
        self._events: Deque[DiagnosticEvent] = deque(maxlen=max_size)

    def record(self, event: DiagnosticEvent) -> None:
        self._events.append(event)

    def events(
        self,
        name: Optional[str] = None,
        level: Optional[int] = None,
    ) -> List[DiagnosticEvent]:
        """
        Query recorded events.

        Args:
            name: Only events with this name (e.g., "tool.not_found")
            level: Only events at exactly this logging level

        Returns:
            Matching events, oldest first
        """
        return [
            event for event in self._events
            if (name is None or event.name == name)
            and (level is None or event.level == level)
        ]

    def names(self) -> List[str]:
        return [event.name for event in self._events]

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
