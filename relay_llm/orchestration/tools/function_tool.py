import inspect
from typing import Any, Callable, Dict, Optional

from ...models.conversation_types import ToolDefinition
from ..tool_registry import Tool
from .schema_utils import schema_from_callable


class FunctionTool(Tool):
    """Expose a plain (sync or async) function as a tool.

    The name defaults to the function name, the description to its
    docstring, and the input schema is derived from its signature.
    """

    def __init__(
        self,
        handler: Callable[..., Any],
        name: Optional[str] = None,
        description: Optional[str] = None,
        input_schema: Optional[Dict[str, Any]] = None,
    ):
        self._handler = handler
        self._definition = ToolDefinition(
            name=name or handler.__name__,
            description=description if description is not None else (inspect.getdoc(handler) or ""),
            input_schema=input_schema if input_schema is not None else schema_from_callable(handler),
        )

    def definition(self) -> ToolDefinition:
        return self._definition

    async def execute(self, tool_input: Dict[str, Any]) -> Any:
        result = self._handler(**tool_input)
        if inspect.isawaitable(result):
            result = await result
        return result


def function_tool(
    name: Optional[str] = None,
    description: Optional[str] = None,
    input_schema: Optional[Dict[str, Any]] = None,
) -> Callable[[Callable[..., Any]], FunctionTool]:
    """Decorator form of ``FunctionTool``."""
    def wrap(handler: Callable[..., Any]) -> FunctionTool:
        return FunctionTool(handler, name=name, description=description, input_schema=input_schema)
    return wrap
