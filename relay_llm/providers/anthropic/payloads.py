from __future__ import annotations

import json
from typing import Any, Dict, List

from ...config.constants import ANTHROPIC_API_VERSION
from ...models.conversation_types import ToolDefinition, ToolResult
from ...models.generation import ProviderRequest


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "x-api-key": api_key,
        "anthropic-version": ANTHROPIC_API_VERSION,
        "content-type": "application/json",
    }


def assemble_messages_body(request: ProviderRequest) -> Dict[str, Any]:
    """Build the Messages API body for one round.

    Optional sampling knobs are only sent when set; ``system`` and ``tools``
    are dropped when empty to satisfy the API validators. Vendor extras are
    applied last so callers can override anything.
    """
    body: Dict[str, Any] = {
        "model": request.model,
        "max_tokens": request.max_tokens,
        "messages": request.wire_messages(),
        "temperature": request.temperature,
        "stream": False,
    }
    if request.top_p is not None:
        body["top_p"] = request.top_p
    if request.top_k is not None:
        body["top_k"] = request.top_k
    if request.system:
        body["system"] = request.system
    if request.tools:
        body["tools"] = request.tools
    body.update(request.extra)
    return body


def tool_declaration(definition: ToolDefinition) -> Dict[str, Any]:
    return definition.to_wire()


def tool_result_block(result: ToolResult) -> Dict[str, Any]:
    """Anthropic ``tool_result`` block; the output travels as a JSON string."""
    return {
        "type": "tool_result",
        "tool_use_id": result.id,
        "content": json.dumps(result.output, default=str),
        "is_error": result.is_error,
    }


def tool_result_blocks(results: List[ToolResult]) -> List[Dict[str, Any]]:
    return [tool_result_block(result) for result in results]
