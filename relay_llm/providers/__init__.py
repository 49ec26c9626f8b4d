"""
Provider Adapters Layer

This layer contains all LLM provider-specific implementations.
Each provider adapter translates between the vendor-neutral request and
response model and the provider's wire schema.
"""

from .anthropic.adapter import AnthropicAdapter
from .base import ProviderAdapter
from .errors import ErrorMapper, MalformedResponseError, ProviderError, TransportError
from .factory import ADAPTERS, create_provider
from .openai.adapter import OpenAIAdapter
from .transport import HttpxTransport, Transport

__all__ = [
    "ProviderAdapter",
    "AnthropicAdapter",
    "OpenAIAdapter",
    "create_provider",
    "ADAPTERS",
    "Transport",
    "HttpxTransport",
    "ErrorMapper",
    "ProviderError",
    "TransportError",
    "MalformedResponseError",
]
