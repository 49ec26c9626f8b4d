import json
from typing import Any, Dict, List

from ...models.conversation_types import ConversationMessage, ToolDefinition, ToolResult
from ...models.generation import ProviderRequest


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def flatten_content(message: ConversationMessage) -> str:
    """Chat Completions only accepts text here; collapse block lists."""
    if isinstance(message.content, str):
        return message.content
    parts = []
    for block in message.content:
        if block.get("type") == "text":
            parts.append(block.get("text") or "")
        elif block.get("type") == "tool_result":
            parts.append(str(block.get("content", "")))
    return "\n".join(part for part in parts if part)


def transform_messages(request: ProviderRequest) -> List[Dict[str, Any]]:
    messages: List[Dict[str, Any]] = []
    if request.system:
        messages.append({"role": "system", "content": request.system})
    for message in request.messages:
        messages.append({"role": message.role.value, "content": flatten_content(message)})
    return messages


def build_chat_completions_payload(request: ProviderRequest) -> Dict[str, Any]:
    """Build the Chat Completions body for one round."""
    payload: Dict[str, Any] = {
        "model": request.model,
        "messages": transform_messages(request),
        "temperature": request.temperature,
        "max_tokens": request.max_tokens,
        "top_p": request.top_p if request.top_p is not None else 1.0,
        "frequency_penalty": 0.0,
        "presence_penalty": 0.0,
    }
    if request.tools:
        payload["tools"] = request.tools
        payload["tool_choice"] = "auto"
    payload.update(request.extra)
    return payload


def function_declaration(definition: ToolDefinition) -> Dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": definition.name,
            "description": definition.description,
            "parameters": dict(definition.input_schema),
        },
    }


def tool_message(result: ToolResult) -> Dict[str, Any]:
    """``tool`` role message; the output travels in an ``{"output", "is_error"}`` envelope."""
    output = {"output": result.output, "is_error": result.is_error}
    return {
        "role": "tool",
        "tool_call_id": result.id,
        "content": json.dumps(output, default=str),
    }
