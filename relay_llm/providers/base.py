"""
Base Provider Adapter Interface

This module defines the abstract base class for all LLM provider adapters.
All provider implementations must inherit from this class and implement
the required methods to ensure consistent behavior across providers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..config.constants import UNEXPECTED_RESPONSE_FORMAT
from ..config.models import get_models_for_provider
from ..models.conversation_types import (
    ConversationMessage,
    MessageContent,
    ToolCall,
    ToolDefinition,
    ToolResult,
)
from ..models.generation import ProviderRequest, ProviderResponse, ProviderType
from ..observability.logging import Diagnostics
from .errors import ErrorMapper, MalformedResponseError, ProviderError, TransportError
from .transport import HttpxTransport, Transport


class ProviderAdapter(ABC):
    """
    Abstract base class for LLM provider adapters.

    The adapter is responsible for:
    - Translating the vendor-neutral request to the provider's wire body
    - Sending it through the transport collaborator
    - Classifying the raw JSON into Completed / ToolUseRequested / ErrorResponse
    - Translating tool declarations, tool calls and tool results

    Provider adapters should NOT contain:
    - Conversation state
    - Tool execution
    - Cross-provider logic
    """

    provider_type: ProviderType

    def __init__(
        self,
        api_key: str,
        transport: Optional[Transport] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self._api_key = api_key
        self.transport = transport or HttpxTransport()
        parent = diagnostics or Diagnostics("providers")
        self.diagnostics = parent.child(f"providers.{self.get_provider_name()}")

    async def generate(self, request: ProviderRequest) -> ProviderResponse:
        """
        Send one round to the provider and normalize the answer.

        Never raises for transport, vendor or format failures: they come back
        as an ``ErrorResponse`` after being reported to diagnostics.
        """
        provider = self.get_provider_name()
        with self.diagnostics.track_request("generate", request.model) as request_info:
            url, headers, body = self.build_http_request(request)
            try:
                raw = await self.transport.send(url, headers, body)
                response = self.classify_response(raw, request.model)
            except TransportError as e:
                message, vendor_type = self.parse_error_envelope(e.payload)
                error = ErrorMapper.from_transport(e, provider, message, vendor_type)
                return self._report_failure(error, request, request_info)
            except ProviderError as e:
                return self._report_failure(e, request, request_info)

            request_info['outcome'] = response.kind.value
            if response.usage:
                self.diagnostics.log_usage(response.usage, request.model, request_info['request_id'])
            return response

    def classify_response(self, raw: Any, model: str) -> ProviderResponse:
        """
        Map a decoded 2xx body to a response variant.

        Raises:
            ProviderError: If the body is a vendor error envelope
            MalformedResponseError: If the body matches no expected shape
        """
        if not isinstance(raw, dict):
            raise MalformedResponseError(UNEXPECTED_RESPONSE_FORMAT, provider=self.get_provider_name())
        message, vendor_type = self.parse_error_envelope(raw)
        if message:
            raise ErrorMapper.vendor_error(
                self.get_provider_name(), message, vendor_type, payload=raw
            )
        return self.parse_response(raw, model)

    def _report_failure(
        self,
        error: ProviderError,
        request: ProviderRequest,
        request_info: Dict[str, Any],
    ) -> ProviderResponse:
        request_info['outcome'] = "error"
        self.diagnostics.error(
            "provider.error",
            "Provider request failed",
            error=error,
            model=request.model,
            request_id=request_info['request_id'],
            status_code=error.status_code,
        )
        return ErrorMapper.to_response(error, self.get_provider_name(), request.model)

    @abstractmethod
    def build_http_request(self, request: ProviderRequest) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
        """Return ``(url, headers, body)`` for the vendor endpoint."""
        pass

    @abstractmethod
    def parse_error_envelope(self, payload: Optional[Dict[str, Any]]) -> Tuple[Optional[str], Optional[str]]:
        """Return ``(message, error_type)`` when ``payload`` is a vendor error envelope."""
        pass

    @abstractmethod
    def parse_response(self, raw: Dict[str, Any], model: str) -> ProviderResponse:
        """Classify a successful, non-error body."""
        pass

    @abstractmethod
    def supports_tool_use(self) -> bool:
        pass

    @abstractmethod
    def prepare_tools_for_request(self, tools: List[ToolDefinition]) -> List[Dict[str, Any]]:
        """Map each tool definition to the vendor's declaration shape."""
        pass

    @abstractmethod
    def has_tool_calls(self, raw: Optional[Dict[str, Any]]) -> bool:
        pass

    @abstractmethod
    def extract_tool_calls(self, raw: Optional[Dict[str, Any]]) -> List[ToolCall]:
        pass

    @abstractmethod
    def format_tool_results(self, results: List[ToolResult]) -> MessageContent:
        """Content for the message that feeds tool outputs back to the model."""
        pass

    @abstractmethod
    def parse_tool_results(self, content: MessageContent) -> List[ToolResult]:
        """Inverse of ``format_tool_results``."""
        pass

    @abstractmethod
    def extract_response_messages(self, raw: Optional[Dict[str, Any]]) -> List[ConversationMessage]:
        """Assistant message(s) to append to the conversation for ``raw``."""
        pass

    def get_available_models(self) -> List[str]:
        return get_models_for_provider(self.provider_type)

    def is_available(self) -> bool:
        """Check if the adapter has a credential to send with requests."""
        return bool(self._api_key)

    def get_provider_name(self) -> str:
        return self.provider_type.value
