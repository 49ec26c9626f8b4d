"""Orchestration: the tool loop, tool registry and cancellation."""

from .cancellation import CancellationToken
from .errors import (
    ConfigurationError,
    GenerationCancelled,
    LoopLimitExceeded,
    OrchestratorError,
    ToolExecutionError,
    ToolNotFound,
)
from .orchestrator import Orchestrator, OrchestratorState
from .tool_registry import Tool, ToolRegistry
from .tools import FunctionTool, function_tool, schema_from_callable

__all__ = [
    # Core orchestration
    "Orchestrator",
    "OrchestratorState",
    "CancellationToken",

    # Tool infrastructure
    "Tool",
    "ToolRegistry",
    "FunctionTool",
    "function_tool",
    "schema_from_callable",

    # Errors
    "OrchestratorError",
    "ConfigurationError",
    "ToolNotFound",
    "ToolExecutionError",
    "LoopLimitExceeded",
    "GenerationCancelled",
]
