"""
Common exception classes for the authenticated API client.

This module defines the exception hierarchy raised by the transport and the
session-recovery services so callers can tell network failures, HTTP status
failures and refresh failures apart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from authclient.core.domain.request_descriptor import RequestDescriptor
    from authclient.core.domain.response_envelope import ResponseEnvelope


class ApiClientError(Exception):
    """Base exception class for all API client errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        *,
        status_code: int | None = None,
        descriptor: RequestDescriptor | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            status_code: HTTP status code, when a response was received
            descriptor: The request that produced this failure, if any
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        self.descriptor = descriptor
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    @property
    def envelope(self) -> ResponseEnvelope[Any] | None:
        return None

    def to_dict(self) -> dict:
        error_dict: dict[str, Any] = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }
        if self.status_code is not None:
            error_dict["status_code"] = self.status_code
        if self.descriptor is not None:
            error_dict["method"] = self.descriptor.method
            error_dict["path"] = self.descriptor.path
        return {"error": error_dict}


class TransportError(ApiClientError):
    """Raised when no response was received (connection, DNS, timeout)."""

    def __init__(
        self,
        message: str = "Network connection error",
        details: dict | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, status_code=None, **kwargs)


class ApiStatusError(ApiClientError):
    """Raised when the server answered with a non-2xx status."""

    def __init__(
        self,
        message: str = "Request failed",
        details: dict | None = None,
        *,
        status_code: int,
        envelope: ResponseEnvelope[Any] | None = None,
        response: httpx.Response | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, status_code=status_code, **kwargs)
        self._envelope = envelope
        self.response = response

    @property
    def envelope(self) -> ResponseEnvelope[Any] | None:
        return self._envelope

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self._envelope is not None:
            result["error"]["envelope"] = self._envelope.model_dump()
        return result


class UnauthorizedError(ApiStatusError):
    """Raised for 401 responses; the only status that triggers a refresh."""

    def __init__(
        self,
        message: str = "Unauthorized",
        details: dict | None = None,
        **kwargs: Any,
    ):
        kwargs.pop("status_code", None)
        super().__init__(message, details, status_code=401, **kwargs)


class RefreshError(ApiClientError):
    """Raised when the session-refresh call did not succeed."""

    def __init__(
        self,
        message: str = "Session refresh failed",
        details: dict | None = None,
        *,
        cause: ApiClientError | None = None,
        **kwargs: Any,
    ):
        status_code = kwargs.pop(
            "status_code", cause.status_code if cause is not None else None
        )
        super().__init__(message, details, status_code=status_code, **kwargs)
        self.cause = cause


class ResponseFormatError(ApiClientError):
    """Raised when a 2xx body is not a valid response envelope."""

    def __init__(
        self,
        message: str = "Malformed response envelope",
        details: dict | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)


class ConfigurationError(ApiClientError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)
