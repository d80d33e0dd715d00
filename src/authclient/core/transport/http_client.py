"""Thin shared HTTP transport for the authenticated API.

One instance is built by the composition root and shared by every consumer.
It sends credentials with every call, decodes the response envelope and runs
the registered response interceptors. It performs no retries, no caching and
no timeout handling of its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any

import httpx

from authclient.core.common.exceptions import (
    ApiClientError,
    ApiStatusError,
    ResponseFormatError,
    TransportError,
    UnauthorizedError,
)
from authclient.core.common.logging_utils import redact_headers
from authclient.core.config.app_config import ClientConfig
from authclient.core.constants.message_constants import (
    INVALID_REQUEST_ERROR,
    MALFORMED_ENVELOPE_ERROR,
    NETWORK_CONNECTION_ERROR,
    REQUEST_FAILED_ERROR,
)
from authclient.core.domain.request_descriptor import RequestDescriptor
from authclient.core.domain.response_envelope import (
    ResponseEnvelope,
    envelope_from_response,
    parse_envelope,
)
from authclient.core.interfaces.response_interceptor_interface import (
    IResponseInterceptor,
)

logger = logging.getLogger(__name__)


class TransportClient:
    def __init__(
        self,
        config: ClientConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Client configuration; ``base_url`` is resolved once here
            client: Optional pre-built httpx client. A client passed in is
                not closed by ``aclose``.
        """
        self.config = config
        self.base_url = config.base_url
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=config.timeout)
        self._registry: tuple[tuple[str, IResponseInterceptor], ...] = ()

    # --- interceptor registry ---

    @property
    def interceptors(self) -> tuple[IResponseInterceptor, ...]:
        return tuple(interceptor for _, interceptor in self._registry)

    def attach_interceptor(
        self, interceptor: IResponseInterceptor, key: str | None = None
    ) -> Callable[[], None]:
        """Register ``interceptor`` under ``key`` (default: ``interceptor.key``).

        Attaching the same instance again is a no-op; attaching a different
        instance under an existing key replaces the old one in place.
        Returns a callable that detaches this registration.
        """
        key = key or interceptor.key
        current = self._registry
        existing = next((i for k, i in current if k == key), None)
        if existing is interceptor:
            return lambda: self.detach_interceptor(key, interceptor)

        if existing is None:
            self._registry = (*current, (key, interceptor))
        else:
            self._registry = tuple(
                (k, interceptor if k == key else i) for k, i in current
            )
            logger.debug("Replaced response interceptor %r", key)

        return lambda: self.detach_interceptor(key, interceptor)

    def detach_interceptor(
        self, key: str, interceptor: IResponseInterceptor | None = None
    ) -> None:
        """Remove the registration under ``key``.

        When ``interceptor`` is given, only that exact instance is removed, so
        a stale detach handle never removes its replacement.
        """
        self._registry = tuple(
            (k, i)
            for k, i in self._registry
            if not (k == key and (interceptor is None or i is interceptor))
        )

    # --- requests ---

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope[Any]:
        descriptor = RequestDescriptor(
            method=method,
            path=path,
            params=params,
            json=json,
            headers=headers,
            with_credentials=True,
        )
        return await self.dispatch(descriptor)

    async def get(self, path: str, **options: Any) -> ResponseEnvelope[Any]:
        return await self.request("GET", path, **options)

    async def post(self, path: str, **options: Any) -> ResponseEnvelope[Any]:
        return await self.request("POST", path, **options)

    async def put(self, path: str, **options: Any) -> ResponseEnvelope[Any]:
        return await self.request("PUT", path, **options)

    async def patch(self, path: str, **options: Any) -> ResponseEnvelope[Any]:
        return await self.request("PATCH", path, **options)

    async def delete(self, path: str, **options: Any) -> ResponseEnvelope[Any]:
        return await self.request("DELETE", path, **options)

    async def dispatch(self, descriptor: RequestDescriptor) -> ResponseEnvelope[Any]:
        """Send ``descriptor`` and run it through the interceptor chain."""
        # Snapshot so (re-)registration never affects a call already in flight.
        interceptors = self.interceptors

        try:
            envelope = await self.send(descriptor)
        except ApiClientError as error:
            return await self._recover(interceptors, error, descriptor)

        for interceptor in interceptors:
            envelope = await interceptor.on_response(envelope, descriptor)
        return envelope

    async def _recover(
        self,
        interceptors: tuple[IResponseInterceptor, ...],
        error: ApiClientError,
        descriptor: RequestDescriptor,
    ) -> ResponseEnvelope[Any]:
        for index, interceptor in enumerate(interceptors):
            try:
                envelope = await interceptor.on_failure(error)
            except ApiClientError as next_error:
                error = next_error
                continue

            # A recovered envelope only passes through the remaining hooks.
            for later in interceptors[index + 1 :]:
                envelope = await later.on_response(envelope, descriptor)
            return envelope

        raise error

    async def send(self, descriptor: RequestDescriptor) -> ResponseEnvelope[Any]:
        """Perform one HTTP exchange for ``descriptor``, bypassing interceptors.

        Raises:
            TransportError: no response was received
            UnauthorizedError: the server answered 401
            ApiStatusError: the server answered any other non-2xx status
            ResponseFormatError: a 2xx body is not a JSON envelope
            ApiClientError: the request could not be built (e.g. invalid URL)
        """
        try:
            request = self.client.build_request(
                descriptor.method,
                self.url_for(descriptor.path),
                params=descriptor.params,
                json=descriptor.json,
                headers=descriptor.headers,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise ApiClientError(
                INVALID_REQUEST_ERROR.format(
                    method=descriptor.method, path=descriptor.path, error=e
                ),
                descriptor=descriptor,
            ) from e
        if not descriptor.with_credentials:
            request.headers.pop("cookie", None)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Sending %s headers=%s",
                descriptor.describe(),
                redact_headers(request.headers),
            )

        try:
            response = await self.client.send(request)
        except httpx.RequestError as e:
            raise TransportError(
                NETWORK_CONNECTION_ERROR.format(error=e),
                details={"url": str(request.url)},
                descriptor=descriptor,
            ) from e

        if not response.is_success:
            raise self._status_error(response, descriptor)

        if not response.content:
            return ResponseEnvelope[Any](code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseFormatError(
                MALFORMED_ENVELOPE_ERROR.format(
                    method=descriptor.method, path=descriptor.path, error=e
                ),
                status_code=response.status_code,
                descriptor=descriptor,
            ) from e

        envelope = parse_envelope(payload)
        if envelope is None:
            raise ResponseFormatError(
                MALFORMED_ENVELOPE_ERROR.format(
                    method=descriptor.method,
                    path=descriptor.path,
                    error=f"unexpected {type(payload).__name__} payload",
                ),
                status_code=response.status_code,
                descriptor=descriptor,
            )
        return envelope

    def _status_error(
        self, response: httpx.Response, descriptor: RequestDescriptor
    ) -> ApiStatusError:
        envelope = envelope_from_response(response)
        message = REQUEST_FAILED_ERROR.format(
            method=descriptor.method,
            path=descriptor.path,
            status_code=response.status_code,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s (envelope=%r)", message, envelope)

        if response.status_code == 401:
            return UnauthorizedError(
                message, envelope=envelope, response=response, descriptor=descriptor
            )
        return ApiStatusError(
            message,
            status_code=response.status_code,
            envelope=envelope,
            response=response,
            descriptor=descriptor,
        )

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    # --- lifecycle ---

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> TransportClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
