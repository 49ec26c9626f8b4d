# Static model catalog per provider. No network call is made to build it.
from typing import Dict, List

from ..models.generation import ProviderType

PROVIDER_MODELS: Dict[ProviderType, List[str]] = {
    ProviderType.ANTHROPIC: [
        "claude-3-5-sonnet-20241022",
        "claude-3-5-haiku-20241022",
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
    ],
    ProviderType.OPENAI: [
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4-turbo",
        "gpt-3.5-turbo",
    ],
}

DEFAULT_MODELS: Dict[ProviderType, str] = {
    ProviderType.ANTHROPIC: "claude-3-5-sonnet-20241022",
    ProviderType.OPENAI: "gpt-4o-mini",
}


def get_models_for_provider(provider: ProviderType) -> List[str]:
    """Return a copy of the catalog for ``provider`` (empty when unknown)."""
    return list(PROVIDER_MODELS.get(ProviderType(provider), []))


def get_default_model(provider: ProviderType) -> str:
    return DEFAULT_MODELS[ProviderType(provider)]
