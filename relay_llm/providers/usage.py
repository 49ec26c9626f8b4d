"""
Usage normalization.

Providers report token counts under different names; every adapter runs its
raw usage block through ``normalize_usage`` so responses share one shape:
``{"prompt_tokens", "completion_tokens", "total_tokens"}``.
"""

from typing import Any, Dict, Optional


def normalize_usage(usage_data: Optional[Dict[str, Any]], provider: str) -> Dict[str, Any]:
    normalized = {
        "prompt_tokens": 0,
        "completion_tokens": 0,
        "total_tokens": 0,
    }
    if not isinstance(usage_data, dict):
        return normalized

    if provider == "anthropic":
        # Anthropic uses input_tokens/output_tokens and reports no total
        normalized["prompt_tokens"] = _as_int(usage_data.get("input_tokens"))
        normalized["completion_tokens"] = _as_int(usage_data.get("output_tokens"))
        cache = {
            key: usage_data[key]
            for key in ("cache_creation_input_tokens", "cache_read_input_tokens")
            if usage_data.get(key) is not None
        }
        if cache:
            normalized["cache_info"] = cache
    else:
        normalized["prompt_tokens"] = _as_int(usage_data.get("prompt_tokens"))
        normalized["completion_tokens"] = _as_int(usage_data.get("completion_tokens"))
        normalized["total_tokens"] = _as_int(usage_data.get("total_tokens"))

    if not normalized["total_tokens"]:
        normalized["total_tokens"] = normalized["prompt_tokens"] + normalized["completion_tokens"]
    return normalized


def _as_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0
