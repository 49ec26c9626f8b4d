"""Canned vendor response bodies for adapter and orchestrator tests."""

from typing import Any, Dict, List, Optional, Tuple

ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"
OPENAI_MODEL = "gpt-4o-mini"


def anthropic_text(text: str, stop_reason: str = "end_turn", model: str = ANTHROPIC_MODEL) -> Dict[str, Any]:
    return {
        "id": "msg_text",
        "type": "message",
        "role": "assistant",
        "model": model,
        "content": [{"type": "text", "text": text}],
        "stop_reason": stop_reason,
        "usage": {"input_tokens": 10, "output_tokens": 5},
    }


def anthropic_tool_use(
    calls: List[Tuple[str, str, Dict[str, Any]]],
    text: Optional[str] = None,
    model: str = ANTHROPIC_MODEL,
) -> Dict[str, Any]:
    """Body requesting ``calls`` given as ``(id, name, input)`` triples."""
    content: List[Dict[str, Any]] = []
    if text:
        content.append({"type": "text", "text": text})
    for call_id, name, tool_input in calls:
        content.append({"type": "tool_use", "id": call_id, "name": name, "input": tool_input})
    return {
        "id": "msg_tool",
        "type": "message",
        "role": "assistant",
        "model": model,
        "content": content,
        "stop_reason": "tool_use",
        "usage": {"input_tokens": 20, "output_tokens": 8},
    }


def anthropic_error(message: str, error_type: str = "invalid_request_error") -> Dict[str, Any]:
    return {"type": "error", "error": {"type": error_type, "message": message}}


def openai_text(text: str, finish_reason: str = "stop", model: str = OPENAI_MODEL) -> Dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "model": model,
        "choices": [{
            "index": 0,
            "message": {"role": "assistant", "content": text},
            "finish_reason": finish_reason,
        }],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


def openai_tool_calls(calls: List[Tuple[str, str, str]], model: str = OPENAI_MODEL) -> Dict[str, Any]:
    """Body requesting ``calls`` given as ``(id, name, json_arguments)`` triples."""
    return {
        "id": "chatcmpl-2",
        "object": "chat.completion",
        "model": model,
        "choices": [{
            "index": 0,
            "message": {
                "role": "assistant",
                "content": None,
                "tool_calls": [
                    {"id": call_id, "type": "function", "function": {"name": name, "arguments": arguments}}
                    for call_id, name, arguments in calls
                ],
            },
            "finish_reason": "tool_calls",
        }],
        "usage": {"prompt_tokens": 12, "completion_tokens": 7, "total_tokens": 19},
    }


def openai_error(message: str, error_type: str = "invalid_request_error") -> Dict[str, Any]:
    return {"error": {"message": message, "type": error_type, "code": None}}
