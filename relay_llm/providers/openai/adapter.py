from typing import Any, Dict, List, Optional, Tuple

from ...config.constants import OPENAI_API_URL
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
from .payloads import build_chat_completions_payload, build_headers, function_declaration, tool_message


class OpenAIAdapter(ProviderAdapter):
    """
    OpenAI Chat Completions adapter.

    Text generation works end to end. Tool use is reported as unsupported:
    Chat Completions expects one ``tool`` role message per result, which the
    two-role conversation model cannot carry, so the orchestrator takes the
    plain path. The translation helpers are still provided.
    """

    provider_type = ProviderType.OPENAI
    api_url = OPENAI_API_URL

    def build_http_request(self, request: ProviderRequest) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
        return self.api_url, build_headers(self._api_key), build_chat_completions_payload(request)

    def parse_error_envelope(self, payload: Optional[Dict[str, Any]]) -> Tuple[Optional[str], Optional[str]]:
        return parsers.parse_error_envelope(payload)

    def parse_response(self, raw: Dict[str, Any], model: str) -> ProviderResponse:
        return parsers.parse_chat_completion(raw, model)

    def supports_tool_use(self) -> bool:
        return False

    def prepare_tools_for_request(self, tools: List[ToolDefinition]) -> List[Dict[str, Any]]:
        return [function_declaration(tool) for tool in tools]

    def has_tool_calls(self, raw: Optional[Dict[str, Any]]) -> bool:
        return parsers.has_tool_calls(raw)

    def extract_tool_calls(self, raw: Optional[Dict[str, Any]]) -> List[ToolCall]:
        return parsers.extract_tool_calls(raw)

    def format_tool_results(self, results: List[ToolResult]) -> MessageContent:
        return [tool_message(result) for result in results]

    def parse_tool_results(self, content: MessageContent) -> List[ToolResult]:
        return parsers.parse_tool_messages(content)

    def extract_response_messages(self, raw: Optional[Dict[str, Any]]) -> List[ConversationMessage]:
        message = parsers.first_message(raw)
        text = message.get("content") if message else None
        if not isinstance(text, str) or not text:
            return []
        return [ConversationMessage(role=TurnRole.ASSISTANT, content=text)]
