from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from ...config.constants import UNEXPECTED_RESPONSE_FORMAT
from ...models.conversation_types import ToolCall, ToolResult
from ...models.generation import Completed, ProviderResponse, ToolUseRequested
from ..errors import MalformedResponseError
from ..usage import normalize_usage

TOOL_USE_STOP_REASON = "tool_use"


def parse_error_envelope(payload: Optional[Dict[str, Any]]) -> Tuple[Optional[str], Optional[str]]:
    """Extract ``(message, type)`` from ``{"type": "error", "error": {...}}``."""
    if not isinstance(payload, dict):
        return None, None
    error = payload.get("error")
    if payload.get("type") != "error" and not isinstance(error, dict):
        return None, None
    if isinstance(error, dict):
        return str(error.get("message") or "unknown error"), error.get("type")
    return "unknown error", None


def content_blocks(raw: Optional[Dict[str, Any]]) -> Optional[List[Dict[str, Any]]]:
    if not isinstance(raw, dict):
        return None
    content = raw.get("content")
    if not isinstance(content, list):
        return None
    return [block for block in content if isinstance(block, dict)]


def extract_text(raw: Optional[Dict[str, Any]]) -> str:
    """Concatenated text of every ``text`` block."""
    return "".join(
        block.get("text") or ""
        for block in content_blocks(raw) or []
        if block.get("type") == "text"
    )


def extract_tool_calls(raw: Optional[Dict[str, Any]]) -> List[ToolCall]:
    calls = []
    for block in content_blocks(raw) or []:
        if block.get("type") != "tool_use":
            continue
        tool_input = block.get("input")
        calls.append(ToolCall(
            id=str(block.get("id", "")),
            name=str(block.get("name", "")),
            input=tool_input if isinstance(tool_input, dict) else {},
        ))
    return calls


def has_tool_calls(raw: Optional[Dict[str, Any]]) -> bool:
    if not isinstance(raw, dict) or raw.get("stop_reason") != TOOL_USE_STOP_REASON:
        return False
    return any(block.get("type") == "tool_use" for block in content_blocks(raw) or [])


def parse_messages_response(raw: Dict[str, Any], model: str) -> ProviderResponse:
    """Classify a Messages API body.

    Raises:
        MalformedResponseError: If there is no content list or stop reason
    """
    blocks = content_blocks(raw)
    stop_reason = raw.get("stop_reason") if blocks is not None else None
    if not stop_reason:
        raise MalformedResponseError(UNEXPECTED_RESPONSE_FORMAT, provider="anthropic", payload=raw)

    usage = normalize_usage(raw.get("usage"), "anthropic")
    if has_tool_calls(raw):
        return ToolUseRequested(
            tool_calls=extract_tool_calls(raw),
            text=extract_text(raw),
            raw=raw,
            provider="anthropic",
            model=raw.get("model", model),
            usage=usage,
        )
    return Completed(
        text=extract_text(raw),
        finish_reason=stop_reason,
        raw=raw,
        provider="anthropic",
        model=raw.get("model", model),
        usage=usage,
    )


def parse_tool_result_blocks(content: Any) -> List[ToolResult]:
    """Rebuild ``ToolResult`` values from ``tool_result`` blocks."""
    if not isinstance(content, list):
        return []
    results = []
    for block in content:
        if not isinstance(block, dict) or block.get("type") != "tool_result":
            continue
        output = block.get("content")
        if isinstance(output, str):
            try:
                output = json.loads(output)
            except json.JSONDecodeError:
                pass
        results.append(ToolResult(
            id=str(block.get("tool_use_id", "")),
            output=output,
            is_error=bool(block.get("is_error", False)),
        ))
    return results
