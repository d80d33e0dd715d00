from __future__ import annotations

import logging
from typing import Any

from authclient.core.common.exceptions import ApiClientError, RefreshError
from authclient.core.constants.message_constants import SESSION_INTERCEPTOR_KEY
from authclient.core.constants.status_catalog import StatusCatalog
from authclient.core.domain.response_envelope import ResponseEnvelope
from authclient.core.interfaces.response_interceptor_interface import (
    IResponseInterceptor,
)
from authclient.core.interfaces.session_interface import ISessionCollaborator
from authclient.core.services.refresh_coordinator import RefreshCoordinator

logger = logging.getLogger(__name__)


class SessionInterceptor(IResponseInterceptor):
    """Recovers 401 failures by refreshing the session and replaying once.

    Every other failure, including a replay that is rejected again, is
    re-raised unchanged. When the refresh itself fails the session owner is
    asked to log out and the original 401 is re-raised.
    """

    def __init__(
        self, coordinator: RefreshCoordinator, session: ISessionCollaborator
    ) -> None:
        self._coordinator = coordinator
        self.session = session

    @property
    def key(self) -> str:
        return SESSION_INTERCEPTOR_KEY

    async def on_failure(self, error: ApiClientError) -> ResponseEnvelope[Any]:
        descriptor = error.descriptor
        if error.status_code != StatusCatalog.UNAUTHORIZED or descriptor is None:
            raise error

        if descriptor.is_replay:
            logger.info(
                "Replay of %s was rejected again; not refreshing twice",
                descriptor.describe(),
            )
            raise error

        try:
            return await self._coordinator.refresh_and_replay(descriptor)
        except RefreshError:
            logger.warning(
                "Session for %s could not be renewed; logging out",
                descriptor.describe(),
            )
            self.session.logout()
            raise error from None
