"""Configuration: settings value object, model catalog and constants."""

from .constants import MAX_TOOL_ROUNDS
from .models import DEFAULT_MODELS, PROVIDER_MODELS, get_default_model, get_models_for_provider
from .settings import LLMConfig

__all__ = [
    "LLMConfig",
    "MAX_TOOL_ROUNDS",
    "DEFAULT_MODELS",
    "PROVIDER_MODELS",
    "get_default_model",
    "get_models_for_provider",
]
