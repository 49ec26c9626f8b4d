"""Bounded, append-only message history sent as context on every request."""

from collections import deque
from typing import Any, Deque, Dict, Iterator, List, Optional

from ..models.conversation_types import ConversationMessage


class Conversation:
    """
    Ordered transcript with a fixed maximum length.

    When an append would exceed ``max_message_history`` the oldest messages
    are evicted first, so the most recent context always wins. Callers that
    need durable history must persist it themselves.
    """

    def __init__(self, max_message_history: int):
        self._validate_capacity(max_message_history)
        self._messages: Deque[ConversationMessage] = deque(maxlen=max_message_history)

    @staticmethod
    def _validate_capacity(n: int) -> None:
        if n < 1:
            raise ValueError(f"max_message_history must be at least 1, got {n}")

    @property
    def max_message_history(self) -> int:
        return self._messages.maxlen

    def append(self, message: ConversationMessage) -> None:
        self._messages.append(message)

    def snapshot(self) -> List[ConversationMessage]:
        """Deep copy of the current messages; later appends do not affect it."""
        return [message.model_copy(deep=True) for message in self._messages]

    def clear(self) -> None:
        self._messages.clear()

    def set_capacity(self, n: int) -> None:
        """Change the bound, evicting from the head until the history fits."""
        self._validate_capacity(n)
        # deque keeps the last n items when built with a smaller maxlen
        self._messages = deque(self._messages, maxlen=n)

    def last(self) -> Optional[ConversationMessage]:
        return self._messages[-1] if self._messages else None

    def to_wire(self) -> List[Dict[str, Any]]:
        return [message.to_wire() for message in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ConversationMessage]:
        return iter(self.snapshot())
