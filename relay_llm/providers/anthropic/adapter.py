from typing import Any, Dict, List, Optional, Tuple

from ...config.constants import ANTHROPIC_API_URL
from ...models.conversation_types import (
    ConversationMessage,
    MessageContent,
    ToolCall,
    ToolDefinition,
    ToolResult,
    TurnRole,
)
from ...models.generation import ProviderRequest, ProviderResponse, ProviderType
from ..base import ProviderAdapter
from . import parsers
from .payloads import assemble_messages_body, build_headers, tool_declaration, tool_result_blocks


class AnthropicAdapter(ProviderAdapter):
    """Anthropic Messages API adapter with tool use."""

    provider_type = ProviderType.ANTHROPIC
    api_url = ANTHROPIC_API_URL

    def build_http_request(self, request: ProviderRequest) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
        return self.api_url, build_headers(self._api_key), assemble_messages_body(request)

    def parse_error_envelope(self, payload: Optional[Dict[str, Any]]) -> Tuple[Optional[str], Optional[str]]:
        return parsers.parse_error_envelope(payload)

    def parse_response(self, raw: Dict[str, Any], model: str) -> ProviderResponse:
        return parsers.parse_messages_response(raw, model)

    def supports_tool_use(self) -> bool:
        return True

    def prepare_tools_for_request(self, tools: List[ToolDefinition]) -> List[Dict[str, Any]]:
        return [tool_declaration(tool) for tool in tools]

    def has_tool_calls(self, raw: Optional[Dict[str, Any]]) -> bool:
        return parsers.has_tool_calls(raw)

    def extract_tool_calls(self, raw: Optional[Dict[str, Any]]) -> List[ToolCall]:
        return parsers.extract_tool_calls(raw)

    def format_tool_results(self, results: List[ToolResult]) -> MessageContent:
        return tool_result_blocks(results)

    def parse_tool_results(self, content: MessageContent) -> List[ToolResult]:
        return parsers.parse_tool_result_blocks(content)

    def extract_response_messages(self, raw: Optional[Dict[str, Any]]) -> List[ConversationMessage]:
        # Keep every block: tool_use blocks must precede their tool_result reply
        blocks = parsers.content_blocks(raw)
        if not blocks or parsers.parse_error_envelope(raw)[0]:
            return []
        return [ConversationMessage(role=TurnRole.ASSISTANT, content=blocks)]
