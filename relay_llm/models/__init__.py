"""Vendor-neutral value objects shared by every layer."""

from .conversation_types import (
    ConversationMessage,
    MessageContent,
    ToolCall,
    ToolDefinition,
    ToolOutput,
    ToolResult,
    TurnRole,
)
from .generation import (
    Completed,
    ErrorResponse,
    ProviderRequest,
    ProviderResponse,
    ProviderType,
    ResponseKind,
    ToolUseRequested,
)

__all__ = [
    "ConversationMessage",
    "MessageContent",
    "TurnRole",
    "ToolCall",
    "ToolDefinition",
    "ToolOutput",
    "ToolResult",
    "Completed",
    "ErrorResponse",
    "ProviderRequest",
    "ProviderResponse",
    "ProviderType",
    "ResponseKind",
    "ToolUseRequested",
]
