"""
Composition root for the authenticated API client.

The application builds exactly one ApiClient at startup and hands it (or its
parts) to every consumer. Nothing in this package creates a transport on its
own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any

import httpx

from authclient.core.config.app_config import ClientConfig, load_config
from authclient.core.interfaces.notifier_interface import INotifier
from authclient.core.interfaces.session_interface import ISessionCollaborator
from authclient.core.services.error_presenter import ErrorPresenter
from authclient.core.services.fetcher import Fetcher
from authclient.core.services.notifiers import LoggingNotifier
from authclient.core.services.refresh_coordinator import RefreshCoordinator
from authclient.core.services.session_interceptor import SessionInterceptor
from authclient.core.transport.http_client import TransportClient

logger = logging.getLogger(__name__)


class ApiClient:
    """Owns the shared transport and the services built on top of it."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        notifier: INotifier | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.transport = TransportClient(config, client=http_client)
        self.coordinator = RefreshCoordinator(self.transport)
        self.presenter = ErrorPresenter(notifier or LoggingNotifier())
        self.fetcher = Fetcher(self.transport, self.presenter)
        self._session_interceptor: SessionInterceptor | None = None
        self._detach_session: Callable[[], None] | None = None

    @property
    def session(self) -> ISessionCollaborator | None:
        if self._session_interceptor is None:
            return None
        return self._session_interceptor.session

    def bind_session(self, session: ISessionCollaborator) -> SessionInterceptor:
        """Attach the session interceptor for ``session``.

        Binding the same collaborator again is a no-op. Binding a different
        one tears the previous interceptor down before attaching the new one,
        so at most one session interceptor is ever registered.
        """
        current = self._session_interceptor
        if current is not None and current.session is session:
            return current

        self.unbind_session()
        interceptor = SessionInterceptor(self.coordinator, session)
        self._detach_session = self.transport.attach_interceptor(interceptor)
        self._session_interceptor = interceptor
        logger.debug("Bound session collaborator %r", session)
        return interceptor

    def unbind_session(self) -> None:
        if self._detach_session is not None:
            self._detach_session()
        self._detach_session = None
        self._session_interceptor = None

    async def aclose(self) -> None:
        self.unbind_session()
        await self.transport.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def build_api_client(
    config: ClientConfig | Mapping[str, Any] | None = None,
    *,
    session: ISessionCollaborator | None = None,
    notifier: INotifier | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ApiClient:
    """Build the application's single ApiClient.

    Args:
        config: A ClientConfig, a mapping of config values, or None to read
            the environment
        session: Session collaborator to bind immediately, if known
        notifier: Where error notifications go; defaults to the log
        http_client: Optional pre-built httpx client to send through

    Returns:
        The ApiClient instance.
    """
    if config is None:
        config = ClientConfig.from_env()
    elif not isinstance(config, ClientConfig):
        config = load_config(config)

    api = ApiClient(config, notifier=notifier, http_client=http_client)
    if session is not None:
        api.bind_session(session)
    logger.info("API client ready for %s", config.base_url)
    return api
