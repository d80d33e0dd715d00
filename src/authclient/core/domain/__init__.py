from authclient.core.domain.failure import FailureRecord
from authclient.core.domain.notification import Notification
from authclient.core.domain.request_descriptor import RequestDescriptor
from authclient.core.domain.response_envelope import ResponseEnvelope
from authclient.core.domain.result import Err, Ok, Result

__all__ = [
    "Err",
    "FailureRecord",
    "Notification",
    "Ok",
    "RequestDescriptor",
    "ResponseEnvelope",
    "Result",
]
