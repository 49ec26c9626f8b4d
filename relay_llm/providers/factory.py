from typing import Dict, Optional, Type, Union

from ..models.generation import ProviderType
from ..observability.logging import Diagnostics
from .anthropic.adapter import AnthropicAdapter
from .base import ProviderAdapter
from .openai.adapter import OpenAIAdapter
from .transport import Transport

ADAPTERS: Dict[ProviderType, Type[ProviderAdapter]] = {
    ProviderType.ANTHROPIC: AnthropicAdapter,
    ProviderType.OPENAI: OpenAIAdapter,
}


def create_provider(
    provider: Union[ProviderType, str],
    api_key: str,
    transport: Optional[Transport] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> ProviderAdapter:
    """
    Build the adapter registered for ``provider``.

    Raises:
        ValueError: If ``provider`` is not a known provider type
    """
    provider_type = ProviderType(provider)
    if provider_type not in ADAPTERS:
        raise ValueError(f"No adapter registered for provider '{provider_type.value}'")
    return ADAPTERS[provider_type](api_key, transport=transport, diagnostics=diagnostics)
