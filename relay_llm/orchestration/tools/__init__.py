"""Helpers for building tools from plain functions."""

from .function_tool import FunctionTool, function_tool
from .schema_utils import schema_from_callable

__all__ = ["FunctionTool", "function_tool", "schema_from_callable"]
