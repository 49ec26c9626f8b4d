from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .conversation_types import ConversationMessage, ToolCall


class ProviderType(str, Enum):
    """Supported LLM providers."""
    ANTHROPIC = "anthropic"
    OPENAI = "openai"


class ProviderRequest(BaseModel):
    """
    Vendor-neutral request for one provider round.

    Built fresh on every round from the current configuration and the
    conversation snapshot. Adapters translate it to their wire schema.
    """
    model: str = Field(..., description="Model identifier")
    messages: List[ConversationMessage] = Field(default_factory=list)
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_tokens: int = Field(default=1024, ge=1, description="Maximum tokens to generate")
    top_p: Optional[float] = Field(None, ge=0.0, le=1.0, description="Nucleus sampling parameter")
    top_k: Optional[int] = Field(None, ge=0, description="Top-k sampling (Anthropic)")
    system: Optional[str] = Field(None, description="System prompt")
    tools: Optional[List[Dict[str, Any]]] = Field(
        None, description="Vendor-shaped tool declarations"
    )

    # Vendor-specific knobs passed through to the wire body untouched
    extra: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('temperature')
    def validate_temperature(cls, v):
        return min(max(v, 0.0), 2.0)

    def wire_messages(self) -> List[Dict[str, Any]]:
        return [message.to_wire() for message in self.messages]


class ResponseKind(str, Enum):
    COMPLETED = "completed"
    TOOL_USE_REQUESTED = "tool_use_requested"
    ERROR = "error"


class ProviderResponseBase(BaseModel):
    """Fields shared by every normalized provider response."""
    raw: Optional[Dict[str, Any]] = Field(
        None, description="Vendor JSON the response was classified from"
    )
    provider: Optional[str] = None
    model: Optional[str] = None
    usage: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return False


class Completed(ProviderResponseBase):
    """The provider produced a final textual answer."""
    kind: Literal[ResponseKind.COMPLETED] = ResponseKind.COMPLETED
    text: str = ""
    finish_reason: Optional[str] = None


class ToolUseRequested(ProviderResponseBase):
    """The provider stopped to ask for one or more tool executions."""
    kind: Literal[ResponseKind.TOOL_USE_REQUESTED] = ResponseKind.TOOL_USE_REQUESTED
    tool_calls: List[ToolCall] = Field(default_factory=list)
    text: str = Field("", description="Any text the model emitted before the tool calls")


class ErrorResponse(ProviderResponseBase):
    """A failed round: transport, vendor, malformed, configuration or cancellation."""
    kind: Literal[ResponseKind.ERROR] = ResponseKind.ERROR
    message: str
    error_type: str = "provider"
    status_code: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return True


ProviderResponse = Union[Completed, ToolUseRequested, ErrorResponse]
