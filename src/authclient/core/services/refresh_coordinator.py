from __future__ import annotations

import logging
from typing import Any

from authclient.core.common.exceptions import (
    ApiClientError,
    RefreshError,
    ResponseFormatError,
)
from authclient.core.constants.message_constants import REFRESH_FAILED_ERROR
from authclient.core.domain.request_descriptor import RequestDescriptor
from authclient.core.domain.response_envelope import ResponseEnvelope
from authclient.core.transport.http_client import TransportClient

logger = logging.getLogger(__name__)


class RefreshCoordinator:
    """Renews the session out of band and replays a failed call once.

    The refresh call goes through ``TransportClient.send`` so it is never
    seen by the response interceptors. The coordinator only reports failure;
    ending the session is left to its caller.
    """

    def __init__(
        self, transport: TransportClient, refresh_path: str | None = None
    ) -> None:
        self._transport = transport
        self.refresh_path = refresh_path or transport.config.refresh_path
        self.refresh_attempts = 0
        self.refresh_failures = 0

    async def refresh(self) -> ResponseEnvelope[Any]:
        """Call the refresh endpoint with credentials.

        Returns:
            The refresh call's envelope (its data carries the session identity)

        Raises:
            RefreshError: the refresh call failed or got no response
        """
        self.refresh_attempts += 1
        descriptor = RequestDescriptor(
            method="GET", path=self.refresh_path, with_credentials=True
        )

        try:
            envelope = await self._transport.send(descriptor)
        except ResponseFormatError as e:
            # The session cookie is renewed by the response headers; an
            # unreadable body does not undo that.
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Ignoring unreadable refresh body: %s", e.message)
            envelope = ResponseEnvelope[Any](code=e.status_code or 200)
        except ApiClientError as e:
            self.refresh_failures += 1
            logger.warning("Session refresh failed: %s", e.message)
            raise RefreshError(
                REFRESH_FAILED_ERROR.format(error=e.message),
                cause=e,
                descriptor=descriptor,
            ) from e

        logger.info("Session refreshed")
        return envelope

    async def replay(self, descriptor: RequestDescriptor) -> ResponseEnvelope[Any]:
        """Re-send ``descriptor`` verbatim, marked as its single replay.

        The replay goes through ``TransportClient.send``; the interceptor
        chain that is recovering the original call continues from there.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Replaying %s", descriptor.describe())
        return await self._transport.send(descriptor.as_replay())

    async def refresh_and_replay(
        self, descriptor: RequestDescriptor
    ) -> ResponseEnvelope[Any]:
        """Refresh the session, then replay ``descriptor`` once.

        Raises:
            RefreshError: the refresh failed; nothing was replayed
            ApiClientError: the replay itself failed
        """
        await self.refresh()
        return await self.replay(descriptor)
