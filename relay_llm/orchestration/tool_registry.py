"""Tool contract and registry.

Host applications implement ``Tool`` (or wrap a plain function with
``FunctionTool``) and register instances with the orchestrator. The
registry resolves provider tool calls by name and turns every outcome,
including failures, into a ``ToolResult`` the model can read.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from jsonschema import Draft202012Validator

from ..models.conversation_types import ToolCall, ToolDefinition, ToolOutput, ToolResult
from ..observability.logging import Diagnostics
from .errors import ToolExecutionError, ToolNotFound


class Tool(ABC):
    """Base class for all tools a model can invoke."""

    @abstractmethod
    def definition(self) -> ToolDefinition:
        """Name, description and input schema exposed to providers."""
        pass

    @property
    def name(self) -> str:
        return self.definition().name

    @abstractmethod
    async def execute(self, tool_input: Dict[str, Any]) -> Any:
        """Run the tool.

        Return any JSON-serializable value, or a ``ToolOutput`` with
        ``is_error=True`` to report a failure the model should see.
        """
        pass


def validate_tool_input(schema: Dict[str, Any], tool_input: Dict[str, Any]) -> None:
    """Raise ``jsonschema.ValidationError`` if ``tool_input`` violates ``schema``."""
    if schema:
        Draft202012Validator(schema).validate(tool_input)


class ToolRegistry:
    """Name-keyed table of tools; at most one tool per name."""

    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self._tools: Dict[str, Tool] = {}
        self.diagnostics = diagnostics or Diagnostics("tools")

    def register(self, tool: Tool) -> None:
        """Register a tool; an existing tool with the same name is replaced.

        Raises:
            TypeError: If tool doesn't implement Tool interface
        """
        if not isinstance(tool, Tool):
            raise TypeError(f"Tool must inherit from Tool base class, got {type(tool)}")

        name = tool.definition().name
        if name in self._tools:
            self.diagnostics.debug("tool.overwritten", f"Replacing registered tool '{name}'", tool=name)
        self._tools[name] = tool
        self.diagnostics.debug("tool.registered", f"Registered tool '{name}'", tool=name)

    def unregister(self, name: str) -> bool:
        """Remove a tool; returns False (and does nothing) if it was absent."""
        if name in self._tools:
            del self._tools[name]
            self.diagnostics.debug("tool.unregistered", f"Unregistered tool '{name}'", tool=name)
            return True
        return False

    def get(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    def names(self) -> List[str]:
        return list(self._tools)

    def definitions(self) -> List[ToolDefinition]:
        return [tool.definition() for tool in self._tools.values()]

    def clear(self) -> None:
        self._tools.clear()

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def execute(self, call: ToolCall) -> Optional[ToolResult]:
        """
        Execute one tool call.

        Returns None for an unregistered tool name (the call is skipped and a
        warning emitted). Invalid input and exceptions raised by the tool come
        back as an error result rather than propagating.
        """
        tool = self._tools.get(call.name)
        if tool is None:
            self.diagnostics.warning(
                "tool.not_found",
                f"Skipping call to unknown tool '{call.name}'",
                error=ToolNotFound(call.name),
                tool=call.name,
                call_id=call.id,
            )
            return None

        try:
            validate_tool_input(tool.definition().input_schema, call.input)
            output = await tool.execute(dict(call.input))
        except Exception as e:
            error = ToolExecutionError(call.name, e)
            self.diagnostics.warning(
                "tool.failed",
                f"Tool '{call.name}' failed",
                error=error,
                tool=call.name,
                call_id=call.id,
            )
            return ToolResult(id=call.id, output=str(error), is_error=True)

        if isinstance(output, ToolOutput):
            result = ToolResult(id=call.id, output=output.output, is_error=output.is_error)
        else:
            result = ToolResult(id=call.id, output=output)

        self.diagnostics.info(
            "tool.executed",
            f"Executed tool '{call.name}'",
            tool=call.name,
            call_id=call.id,
            is_error=result.is_error,
        )
        return result

    async def execute_all(self, calls: List[ToolCall], parallel: bool = False) -> List[ToolResult]:
        """
        Execute one round of tool calls.

        Results keep the order of their originating calls; skipped calls are
        dropped. With ``parallel=True`` the calls run concurrently.
        """
        if parallel:
            outcomes = await asyncio.gather(*(self.execute(call) for call in calls))
        else:
            outcomes = [await self.execute(call) for call in calls]
        return [result for result in outcomes if result is not None]
