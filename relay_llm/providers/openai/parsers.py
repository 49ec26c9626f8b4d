from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from ...config.constants import UNEXPECTED_RESPONSE_FORMAT
from ...models.conversation_types import ToolCall, ToolResult
from ...models.generation import Completed, ProviderResponse, ToolUseRequested
from ..errors import MalformedResponseError
from ..usage import normalize_usage


def parse_error_envelope(payload: Optional[Dict[str, Any]]) -> Tuple[Optional[str], Optional[str]]:
    """Extract ``(message, type)`` from ``{"error": {"message": ..., "type": ...}}``."""
    if not isinstance(payload, dict):
        return None, None
    error = payload.get("error")
    if isinstance(error, dict):
        return str(error.get("message") or "unknown error"), error.get("type")
    if isinstance(error, str) and error:
        return error, None
    return None, None


def first_message(raw: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not isinstance(raw, dict):
        return None
    choices = raw.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    return message if isinstance(message, dict) else None


def extract_tool_calls(raw: Optional[Dict[str, Any]]) -> List[ToolCall]:
    message = first_message(raw) or {}
    calls = []
    for item in message.get("tool_calls") or []:
        function = item.get("function") or {}
        arguments = function.get("arguments") or "{}"
        try:
            parsed = json.loads(arguments) if isinstance(arguments, str) else arguments
        except json.JSONDecodeError:
            parsed = {}
        calls.append(ToolCall(
            id=str(item.get("id", "")),
            name=str(function.get("name", "")),
            input=parsed if isinstance(parsed, dict) else {},
        ))
    return calls


def has_tool_calls(raw: Optional[Dict[str, Any]]) -> bool:
    message = first_message(raw)
    return bool(message and message.get("tool_calls"))


def parse_chat_completion(raw: Dict[str, Any], model: str) -> ProviderResponse:
    """Classify a Chat Completions body.

    Raises:
        MalformedResponseError: If there is no usable first choice
    """
    message = first_message(raw)
    if message is None:
        raise MalformedResponseError(UNEXPECTED_RESPONSE_FORMAT, provider="openai", payload=raw)

    finish_reason = raw["choices"][0].get("finish_reason")
    usage = normalize_usage(raw.get("usage"), "openai")
    if has_tool_calls(raw):
        return ToolUseRequested(
            tool_calls=extract_tool_calls(raw),
            text=message.get("content") or "",
            raw=raw,
            provider="openai",
            model=raw.get("model", model),
            usage=usage,
        )
    content = message.get("content")
    if not isinstance(content, str):
        raise MalformedResponseError(UNEXPECTED_RESPONSE_FORMAT, provider="openai", payload=raw)
    return Completed(
        text=content,
        finish_reason=finish_reason,
        raw=raw,
        provider="openai",
        model=raw.get("model", model),
        usage=usage,
    )


def parse_tool_messages(content: Any) -> List[ToolResult]:
    if not isinstance(content, list):
        return []
    results = []
    for message in content:
        if not isinstance(message, dict) or message.get("role") != "tool":
            continue
        output = message.get("content")
        try:
            output = json.loads(output)
        except (TypeError, json.JSONDecodeError):
            pass
        is_error = False
        if isinstance(output, dict) and set(output) == {"output", "is_error"}:
            is_error = output["is_error"] is True
            output = output["output"]
        results.append(ToolResult(
            id=str(message.get("tool_call_id", "")),
            output=output,
            is_error=is_error,
        ))
    return results
