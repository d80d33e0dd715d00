from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from authclient.core.common.exceptions import ApiClientError
from authclient.core.domain.request_descriptor import RequestDescriptor
from authclient.core.domain.response_envelope import ResponseEnvelope


class IResponseInterceptor(ABC):
    """Interface for response-side middleware registered on the transport.

    Interceptors run in registration order. On failure an interceptor either
    returns an envelope (the call is recovered) or raises; whatever it
    raises becomes the error seen by the next interceptor.
    """

    @property
    def key(self) -> str:
        """Registration key; attaching under an existing key replaces it."""
        return self.__class__.__name__

    async def on_response(
        self, envelope: ResponseEnvelope[Any], descriptor: RequestDescriptor
    ) -> ResponseEnvelope[Any]:
        """Observe a successful response. The default passes it through."""
        return envelope

    @abstractmethod
    async def on_failure(self, error: ApiClientError) -> ResponseEnvelope[Any]:
        """Recover from ``error`` by returning an envelope, or raise."""
