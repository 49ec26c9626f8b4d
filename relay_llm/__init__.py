"""
Relay LLM SDK - provider-neutral conversation and tool orchestration.

This package sends a bounded conversation to an LLM provider, runs the
tools the model asks for and feeds their results back until the model
produces an answer. Supported providers:
- Anthropic (Messages API, with tool use)
- OpenAI (Chat Completions, text only)

Features:
- Bounded FIFO conversation history
- Name-keyed tool registry with JSON-schema input validation
- Bounded tool loop (five follow-up rounds by default)
- Errors returned as values, never raised out of generate
- Structured diagnostics with pluggable sinks
"""

__version__ = "0.1.0"

from .config import LLMConfig, get_default_model, get_models_for_provider
from .conversation import Conversation
from .models.conversation_types import (
    ConversationMessage,
    ToolCall,
    ToolDefinition,
    ToolOutput,
    ToolResult,
    TurnRole,
)
from .models.generation import (
    Completed,
    ErrorResponse,
    ProviderRequest,
    ProviderResponse,
    ProviderType,
    ResponseKind,
    ToolUseRequested,
)
from .observability import Diagnostics, InMemoryDiagnosticsSink
from .orchestration import (
    CancellationToken,
    FunctionTool,
    Orchestrator,
    OrchestratorState,
    Tool,
    ToolRegistry,
    function_tool,
)
from .providers import AnthropicAdapter, HttpxTransport, OpenAIAdapter, ProviderAdapter, create_provider

__all__ = [
    "__version__",
    "Orchestrator",
    "OrchestratorState",
    "CancellationToken",
    "LLMConfig",
    "get_models_for_provider",
    "get_default_model",
    "Conversation",
    "ConversationMessage",
    "TurnRole",
    "Tool",
    "ToolRegistry",
    "FunctionTool",
    "function_tool",
    "ToolCall",
    "ToolDefinition",
    "ToolOutput",
    "ToolResult",
    "ProviderRequest",
    "ProviderResponse",
    "ProviderType",
    "ResponseKind",
    "Completed",
    "ToolUseRequested",
    "ErrorResponse",
    "ProviderAdapter",
    "AnthropicAdapter",
    "OpenAIAdapter",
    "HttpxTransport",
    "create_provider",
    "Diagnostics",
    "InMemoryDiagnosticsSink",
]
