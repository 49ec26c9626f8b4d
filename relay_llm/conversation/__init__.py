"""Conversation history store."""

from .history import Conversation

__all__ = ["Conversation"]
