from authclient.core.interfaces.notifier_interface import INotifier
from authclient.core.interfaces.response_interceptor_interface import (
    IResponseInterceptor,
)
from authclient.core.interfaces.session_interface import ISessionCollaborator

__all__ = ["INotifier", "IResponseInterceptor", "ISessionCollaborator"]
