from authclient.core.services.error_presenter import ErrorPresenter
from authclient.core.services.fetcher import Fetcher
from authclient.core.services.notifiers import LoggingNotifier
from authclient.core.services.refresh_coordinator import RefreshCoordinator
from authclient.core.services.session_interceptor import SessionInterceptor

__all__ = [
    "ErrorPresenter",
    "Fetcher",
    "LoggingNotifier",
    "RefreshCoordinator",
    "SessionInterceptor",
]
