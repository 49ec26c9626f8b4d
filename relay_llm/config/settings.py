"""
LLM configuration value object.

``LLMConfig`` is what the orchestrator derives every round's request from.
It is freely copyable, merges partial updates, and serializes to a plain
mapping so a host application can persist it however it likes.
"""

import os
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from ..models.generation import ProviderType
from .constants import (
    DEFAULT_MAX_MESSAGE_HISTORY,
    DEFAULT_TEMPERATURE,
    ENV_PREFIX,
    PROVIDER_API_KEY_ENV_VARS,
)
from .models import get_default_model


class LLMConfig(BaseModel):
    """Provider selection, credentials and sampling defaults."""

    provider: ProviderType = ProviderType.ANTHROPIC
    api_key: str = Field(default="", repr=False)
    model: str = ""
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_message_history: int = Field(default=DEFAULT_MAX_MESSAGE_HISTORY, ge=1)
    additional_parameters: Dict[str, Any] = Field(
        default_factory=dict,
        description="Extra request parameters (max_tokens, top_p, system, vendor knobs)"
    )

    @model_validator(mode="after")
    def _default_model(self) -> "LLMConfig":
        if not self.model:
            self.model = get_default_model(self.provider)
        return self

    def merged(self, partial: Mapping[str, Any]) -> "LLMConfig":
        """
        Return a new config with ``partial`` applied.

        Top-level keys replace the stored values; ``additional_parameters``
        is merged key by key. Applying the same partial twice yields the
        same config as applying it once.

        Raises:
            ValueError: If ``partial`` names an unknown field
        """
        unknown = set(partial) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown config fields: {sorted(unknown)}")

        data = self.model_dump()
        for key, value in partial.items():
            if key == "additional_parameters":
                data[key] = {**data[key], **dict(value or {})}
            else:
                data[key] = value
        return type(self).model_validate(data)

    def to_mapping(self) -> Dict[str, Any]:
        """Plain-dict form for persistence."""
        return self.model_dump(mode="json")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "LLMConfig":
        return cls.model_validate(dict(mapping))

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, dotenv_path: Optional[str] = None) -> "LLMConfig":
        """
        Build a config from environment variables (after loading ``.env``).

        Reads ``{prefix}PROVIDER``, ``{prefix}API_KEY``, ``{prefix}MODEL``,
        ``{prefix}TEMPERATURE`` and ``{prefix}MAX_MESSAGE_HISTORY``. The API
        key falls back to the vendor's conventional variable, e.g.
        ``ANTHROPIC_API_KEY``.
        """
        load_dotenv(dotenv_path)

        data: Dict[str, Any] = {}
        provider = os.getenv(f"{prefix}PROVIDER")
        if provider:
            data["provider"] = provider.strip().lower()
        resolved = ProviderType(data.get("provider", ProviderType.ANTHROPIC))

        api_key = os.getenv(f"{prefix}API_KEY") or os.getenv(
            PROVIDER_API_KEY_ENV_VARS[resolved.value], ""
        )
        data["api_key"] = api_key

        model = os.getenv(f"{prefix}MODEL")
        if model:
            data["model"] = model
        temperature = os.getenv(f"{prefix}TEMPERATURE")
        if temperature:
            data["temperature"] = float(temperature)
        history = os.getenv(f"{prefix}MAX_MESSAGE_HISTORY")
        if history:
            data["max_message_history"] = int(history)

        return cls.model_validate(data)
