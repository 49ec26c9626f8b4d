"""
JSON-over-HTTP transport consumed by every provider adapter.

The contract is deliberately narrow: ``send(url, headers, body)`` returns the
decoded JSON body of a 2xx response or raises ``TransportError``. Any JSON
value is returned as-is; deciding whether it has the expected shape is the
adapter's job. A client is opened for the duration of one request and
closed on every exit path.
"""

import json
from typing import Any, Dict, Optional, Protocol

import httpx

from ..config.constants import DEFAULT_REQUEST_TIMEOUT
from .errors import TransportError

_UNDECODABLE = object()


class Transport(Protocol):
    """Protocol for transports used by provider adapters."""

    async def send(self, url: str, headers: Dict[str, str], body: Dict[str, Any]) -> Any:
        """POST ``body`` as JSON and return the decoded response body."""
        ...


class HttpxTransport:
    """``Transport`` backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
        """
        self.timeout = timeout
        self._transport = transport

    async def send(self, url: str, headers: Dict[str, str], body: Dict[str, Any]) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, headers=headers, json=body)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {url} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        payload = _decode(response)
        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code} from {url}: {_snippet(response)}",
                status_code=response.status_code,
                payload=payload if isinstance(payload, dict) else None,
            )
        if payload is _UNDECODABLE:
            raise TransportError(
                f"Response from {url} is not valid JSON: {_snippet(response)}",
                status_code=response.status_code,
            )
        return payload


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _UNDECODABLE


def _snippet(response: httpx.Response, limit: int = 200) -> str:
    text = response.text
    return text if len(text) <= limit else text[:limit] + "..."
