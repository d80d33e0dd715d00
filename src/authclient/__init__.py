"""Authenticated API client with transparent session refresh."""

from authclient.core.app.application_factory import ApiClient, build_api_client
from authclient.core.common.exceptions import (
    ApiClientError,
    ApiStatusError,
    ConfigurationError,
    RefreshError,
    ResponseFormatError,
    TransportError,
    UnauthorizedError,
)
from authclient.core.config.app_config import ClientConfig
from authclient.core.constants.status_catalog import StatusCatalog, status_name
from authclient.core.domain import (
    Err,
    FailureRecord,
    Notification,
    Ok,
    RequestDescriptor,
    ResponseEnvelope,
    Result,
)
from authclient.core.interfaces import (
    INotifier,
    IResponseInterceptor,
    ISessionCollaborator,
)
from authclient.core.services import (
    ErrorPresenter,
    Fetcher,
    LoggingNotifier,
    RefreshCoordinator,
    SessionInterceptor,
)
from authclient.core.transport import TransportClient

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ApiStatusError",
    "ClientConfig",
    "ConfigurationError",
    "Err",
    "ErrorPresenter",
    "FailureRecord",
    "Fetcher",
    "INotifier",
    "IResponseInterceptor",
    "ISessionCollaborator",
    "LoggingNotifier",
    "Notification",
    "Ok",
    "RefreshCoordinator",
    "RefreshError",
    "RequestDescriptor",
    "ResponseEnvelope",
    "ResponseFormatError",
    "Result",
    "SessionInterceptor",
    "StatusCatalog",
    "TransportClient",
    "TransportError",
    "UnauthorizedError",
    "build_api_client",
    "status_name",
]
