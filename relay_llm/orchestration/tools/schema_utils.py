from __future__ import annotations

import inspect
import typing as t


def _map_type(ann: t.Any) -> dict:
    origin = t.get_origin(ann) or ann
    args = t.get_args(ann)
    if origin is t.Union:
        # Optional[X] -> X
        non_null = [arg for arg in args if arg is not type(None)]
        return _map_type(non_null[0]) if len(non_null) == 1 else {}
    if origin is bool:
        return {"type": "boolean"}
    if origin is int:
        return {"type": "integer"}
    if origin is float:
        return {"type": "number"}
    if origin is str:
        return {"type": "string"}
    if origin in (list, tuple, set):
        return {"type": "array", "items": _map_type(args[0]) if args else {}}
    if origin is dict:
        return {"type": "object"}
    return {}


def schema_from_callable(func: t.Callable) -> dict:
    """Generate a JSON schema for a Python callable's keyword parameters.

    - Types: bool, int, float, str, list[T], dict and Optional[T] map to
      JSON schema types; anything else is left unconstrained.
    - Required: parameters without default values.
    """
    sig = inspect.signature(func)
    try:
        hints = t.get_type_hints(func)
    except (NameError, TypeError):
        hints = {}

    properties: dict[str, dict] = {}
    required: list[str] = []
    for name, param in sig.parameters.items():
        if param.kind not in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY):
            continue
        properties[name] = _map_type(hints.get(name, t.Any))
        if param.default is inspect.Parameter.empty:
            required.append(name)

    return {
        "type": "object",
        "properties": properties,
        "required": required,
        "additionalProperties": False,
    }
