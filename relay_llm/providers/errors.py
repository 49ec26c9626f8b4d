"""
Error types for provider adapters and their mapping to response values.

Adapters never let these escape ``generate``: ``ErrorMapper.to_response``
turns each one into an ``ErrorResponse`` the orchestrator can return.
"""

from typing import Any, Dict, Optional

from ..models.generation import ErrorResponse

_PROVIDER_LABELS = {"anthropic": "Anthropic", "openai": "OpenAI"}


class ProviderError(Exception):
    """
    Base exception for provider-related errors.

    Attributes:
        provider: Provider name
        status_code: HTTP status code if applicable
        payload: Parsed vendor body if one was available
    """

    error_type = "provider"

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.payload = payload


class TransportError(ProviderError):
    """Connection failure, timeout, non-2xx status or undecodable body."""

    error_type = "transport"


class MalformedResponseError(ProviderError):
    """The body parsed as JSON but matches none of the expected shapes."""

    error_type = "malformed"


class ErrorMapper:
    """Maps provider errors to normalized ``ErrorResponse`` values."""

    @staticmethod
    def to_response(
        error: ProviderError,
        provider: str,
        model: Optional[str] = None,
    ) -> ErrorResponse:
        return ErrorResponse(
            message=str(error),
            error_type=error.error_type,
            status_code=error.status_code,
            raw=error.payload,
            provider=provider,
            model=model,
        )

    @staticmethod
    def vendor_error(
        provider: str,
        vendor_message: str,
        vendor_type: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> ProviderError:
        """Build a ``ProviderError`` carrying the vendor's own error text."""
        label = _PROVIDER_LABELS.get(provider, provider)
        parts = [str(part) for part in (status_code, vendor_type) if part]
        detail = f" ({' '.join(parts)})" if parts else ""
        return ProviderError(
            f"{label} API error{detail}: {vendor_message}",
            provider=provider,
            status_code=status_code,
            payload=payload,
        )

    @staticmethod
    def from_transport(
        error: TransportError,
        provider: str,
        vendor_message: Optional[str],
        vendor_type: Optional[str] = None,
    ) -> ProviderError:
        """
        Reclassify a transport failure whose body is a vendor error envelope.

        A 401 carrying ``{"error": {"message": "invalid x-api-key"}}`` is a
        vendor-reported error, not a network problem, so it becomes a
        ``ProviderError`` with the vendor's text.
        """
        if not vendor_message:
            return error
        return ErrorMapper.vendor_error(
            provider, vendor_message, vendor_type, error.status_code, error.payload
        )
