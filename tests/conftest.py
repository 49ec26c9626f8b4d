"""Shared pytest fixtures for Relay LLM SDK tests."""

import pytest

from relay_llm.config.settings import LLMConfig
from relay_llm.models.generation import ProviderType
from relay_llm.observability.logging import Diagnostics
from relay_llm.observability.sinks.in_memory import InMemoryDiagnosticsSink
from relay_llm.orchestration.tools import FunctionTool
from relay_llm.providers.anthropic.adapter import AnthropicAdapter
from relay_llm.providers.openai.adapter import OpenAIAdapter
from tests.helpers.fakes import FakeTransport


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "ANTHROPIC_API_KEY": "test-anthropic-key",
        "OPENAI_API_KEY": "test-openai-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable LLMConfig.from_env reads.

    Each one is set before being deleted so monkeypatch also undoes values
    a test's .env file loads.
    """
    names = [
        f"RELAY_LLM_{suffix}"
        for suffix in ("PROVIDER", "API_KEY", "MODEL", "TEMPERATURE", "MAX_MESSAGE_HISTORY")
    ]
    names += ["ANTHROPIC_API_KEY", "OPENAI_API_KEY"]
    for name in names:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


@pytest.fixture
def sink():
    return InMemoryDiagnosticsSink()


@pytest.fixture
def diagnostics(sink):
    return Diagnostics("test", sinks=[sink])


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def anthropic_config():
    return LLMConfig(provider=ProviderType.ANTHROPIC, api_key="test-anthropic-key")


@pytest.fixture
def openai_config():
    return LLMConfig(provider=ProviderType.OPENAI, api_key="test-openai-key")


@pytest.fixture
def anthropic_adapter(transport, diagnostics):
    return AnthropicAdapter("test-anthropic-key", transport=transport, diagnostics=diagnostics)


@pytest.fixture
def openai_adapter(transport, diagnostics):
    return OpenAIAdapter("test-openai-key", transport=transport, diagnostics=diagnostics)


@pytest.fixture
def weather_tool():
    """Tool answering every city with a sunny forecast; records its calls."""
    calls = []

    def get_weather(city: str) -> dict:
        """Current weather for a city."""
        calls.append(city)
        return {"city": city, "forecast": "sunny"}

    tool = FunctionTool(get_weather)
    tool.calls = calls
    return tool
