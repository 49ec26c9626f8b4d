"""Unit tests for the tool contract, registry and function tools."""

import asyncio
import logging

import pytest

from relay_llm.models.conversation_types import ToolCall, ToolDefinition, ToolOutput
from relay_llm.orchestration.errors import ToolExecutionError, ToolNotFound
from relay_llm.orchestration.tool_registry import Tool, ToolRegistry
from relay_llm.orchestration.tools import FunctionTool, function_tool, schema_from_callable


class EchoTool(Tool):
    """Tool returning its input; optionally tagged to tell instances apart."""

    def __init__(self, name: str = "echo", tag: str = ""):
        self._name = name
        self.tag = tag
        self.calls = []

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self._name,
            description=f"Echo {self.tag}".strip(),
            input_schema={
                "type": "object",
                "properties": {"text": {"type": "string"}},
                "required": ["text"],
            },
        )

    async def execute(self, tool_input):
        self.calls.append(tool_input)
        return {"echo": tool_input["text"], "tag": self.tag}


class FailingTool(Tool):
    def definition(self) -> ToolDefinition:
        return ToolDefinition(name="boom")

    async def execute(self, tool_input):
        raise RuntimeError("exploded")


class SlowTool(Tool):
    """Sleeps, then reports the order it finished in."""

    def __init__(self, name: str, delay: float, finished: list):
        self._name = name
        self.delay = delay
        self.finished = finished

    def definition(self) -> ToolDefinition:
        return ToolDefinition(name=self._name)

    async def execute(self, tool_input):
        await asyncio.sleep(self.delay)
        self.finished.append(self._name)
        return self._name


@pytest.fixture
def registry(diagnostics):
    return ToolRegistry(diagnostics)


@pytest.mark.unit
class TestToolRegistration:
    """Test registration semantics."""

    def test_register_and_lookup(self, registry):
        tool = EchoTool()
        registry.register(tool)

        assert registry.has("echo")
        assert "echo" in registry
        assert registry.get("echo") is tool
        assert registry.names() == ["echo"]
        assert len(registry) == 1
        assert registry.definitions()[0].name == "echo"

    def test_duplicate_name_last_registration_wins(self, registry, sink):
        registry.register(EchoTool(tag="first"))
        registry.register(EchoTool(tag="second"))

        assert len(registry) == 1
        assert registry.get("echo").tag == "second"
        assert sink.events(name="tool.overwritten")

    def test_unregister(self, registry):
        registry.register(EchoTool())

        assert registry.unregister("echo") is True
        assert not registry.has("echo")
        assert registry.unregister("echo") is False

    def test_register_rejects_non_tools(self, registry):
        with pytest.raises(TypeError):
            registry.register(object())

    def test_clear(self, registry):
        registry.register(EchoTool("a"))
        registry.register(EchoTool("b"))
        registry.clear()

        assert len(registry) == 0


@pytest.mark.unit
class TestToolExecution:
    """Test execution outcomes."""

    @pytest.mark.asyncio
    async def test_execute_returns_result_with_call_id(self, registry):
        registry.register(EchoTool())

        result = await registry.execute(ToolCall(id="call_1", name="echo", input={"text": "hi"}))

        assert result.id == "call_1"
        assert result.output == {"echo": "hi", "tag": ""}
        assert result.is_error is False

    @pytest.mark.asyncio
    async def test_unknown_tool_is_skipped_with_warning(self, registry, sink):
        result = await registry.execute(ToolCall(id="call_1", name="missing", input={}))

        assert result is None
        events = sink.events(name="tool.not_found")
        assert len(events) == 1
        assert events[0].level == logging.WARNING
        assert isinstance(events[0].error, ToolNotFound)
        assert events[0].error.tool_name == "missing"

    @pytest.mark.asyncio
    async def test_exception_becomes_error_result(self, registry, sink):
        registry.register(FailingTool())

        result = await registry.execute(ToolCall(id="call_9", name="boom", input={}))

        assert result.id == "call_9"
        assert result.is_error is True
        assert "exploded" in result.output
        event = sink.events(name="tool.failed")[0]
        assert isinstance(event.error, ToolExecutionError)
        assert isinstance(event.error.original_error, RuntimeError)

    @pytest.mark.asyncio
    async def test_schema_violation_becomes_error_result(self, registry):
        tool = EchoTool()
        registry.register(tool)

        result = await registry.execute(ToolCall(id="call_2", name="echo", input={"text": 5}))

        assert result.is_error is True
        assert tool.calls == []

    @pytest.mark.asyncio
    async def test_tool_output_flags_error(self, registry):
        registry.register(FunctionTool(
            lambda: ToolOutput(output="city not found", is_error=True),
            name="lookup",
            input_schema={"type": "object", "properties": {}},
        ))

        result = await registry.execute(ToolCall(id="c", name="lookup", input={}))

        assert result.is_error is True
        assert result.output == "city not found"

    @pytest.mark.asyncio
    async def test_execute_all_keeps_call_order_and_drops_unknown(self, registry):
        registry.register(EchoTool())
        calls = [
            ToolCall(id="1", name="echo", input={"text": "a"}),
            ToolCall(id="2", name="nope", input={}),
            ToolCall(id="3", name="echo", input={"text": "b"}),
        ]

        results = await registry.execute_all(calls)

        assert [r.id for r in results] == ["1", "3"]

    @pytest.mark.asyncio
    async def test_execute_all_parallel_preserves_order(self, registry):
        finished = []
        registry.register(SlowTool("slow", 0.05, finished))
        registry.register(SlowTool("fast", 0.0, finished))
        calls = [ToolCall(id="1", name="slow"), ToolCall(id="2", name="fast")]

        results = await registry.execute_all(calls, parallel=True)

        assert [r.output for r in results] == ["slow", "fast"]
        assert finished == ["fast", "slow"]


@pytest.mark.unit
class TestFunctionTool:
    """Test wrapping plain functions."""

    def test_definition_from_signature(self):
        def get_weather(city: str, days: int = 1, metric: bool = True) -> dict:
            """Forecast for a city."""
            return {}

        definition = FunctionTool(get_weather).definition()

        assert definition.name == "get_weather"
        assert definition.description == "Forecast for a city."
        assert definition.input_schema["properties"] == {
            "city": {"type": "string"},
            "days": {"type": "integer"},
            "metric": {"type": "boolean"},
        }
        assert definition.input_schema["required"] == ["city"]

    @pytest.mark.asyncio
    async def test_async_handler(self):
        async def add(a: int, b: int) -> int:
            return a + b

        assert await FunctionTool(add).execute({"a": 2, "b": 3}) == 5

    @pytest.mark.asyncio
    async def test_decorator(self):
        @function_tool(name="shout", description="Upper-case text")
        def shout(text: str) -> str:
            return text.upper()

        assert isinstance(shout, FunctionTool)
        assert shout.name == "shout"
        assert await shout.execute({"text": "hi"}) == "HI"

    def test_schema_optional_and_lists(self):
        from typing import List, Optional

        def search(terms: List[str], limit: Optional[int] = None, *args, **kwargs):
            pass

        schema = schema_from_callable(search)

        assert schema["properties"] == {
            "terms": {"type": "array", "items": {"type": "string"}},
            "limit": {"type": "integer"},
        }
        assert schema["required"] == ["terms"]
        assert schema["additionalProperties"] is False
