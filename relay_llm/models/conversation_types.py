from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


class TurnRole(str, Enum):
    """Conversation turn roles."""
    USER = "user"
    ASSISTANT = "assistant"


MessageContent = Union[str, List[Dict[str, Any]]]


class ConversationMessage(BaseModel):
    """A single turn sent to the provider.

    ``content`` is either plain text or a list of vendor content blocks
    (tool-use requests, tool results).
    """

    role: TurnRole
    content: MessageContent

    def to_wire(self) -> Dict[str, Any]:
        return {"role": self.role.value, "content": self.content}


class ToolDefinition(BaseModel):
    """Name, description and JSON schema a provider sees for a tool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    input_schema: Dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": dict(self.input_schema),
        }


class ToolCall(BaseModel):
    """A provider-requested tool invocation."""

    id: str
    name: str
    input: Dict[str, Any] = Field(default_factory=dict)


class ToolResult(BaseModel):
    """Outcome of executing a tool call; ``id`` matches the originating call."""

    id: str
    output: Any = None
    is_error: bool = False


class ToolOutput(BaseModel):
    """Return value a tool uses to flag its own failure."""

    output: Any = None
    is_error: bool = False
