from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from authclient.core.common.exceptions import ApiClientError, TransportError
from authclient.core.domain.request_descriptor import RequestDescriptor
from authclient.core.domain.response_envelope import ResponseEnvelope


@dataclass(frozen=True)
class FailureRecord:
    """A failed call: the raw error plus the decoded error envelope, if any."""

    error: BaseException
    status_code: int | None = None
    envelope: ResponseEnvelope[Any] | None = None
    descriptor: RequestDescriptor | None = None

    @classmethod
    def from_exception(cls, error: BaseException) -> FailureRecord:
        if isinstance(error, ApiClientError):
            return cls(
                error=error,
                status_code=error.status_code,
                envelope=error.envelope,
                descriptor=error.descriptor,
            )
        return cls(error=error)

    @property
    def has_envelope(self) -> bool:
        return self.envelope is not None

    @property
    def is_network_failure(self) -> bool:
        """True when no response was received at all."""
        return isinstance(self.error, TransportError)
