from __future__ import annotations

import logging

from authclient.core.constants.message_constants import (
    GENERIC_ERROR_DESCRIPTION,
    GENERIC_ERROR_TITLE,
)
from authclient.core.constants.status_catalog import status_name
from authclient.core.domain.failure import FailureRecord
from authclient.core.domain.notification import Notification
from authclient.core.interfaces.notifier_interface import INotifier

logger = logging.getLogger(__name__)


class ErrorPresenter:
    """Turns a failed call into a user-facing notification.

    This is a terminal handler: it never re-raises. Callers opt in to it
    when they want to inform the user instead of propagating the failure.
    """

    def __init__(self, notifier: INotifier | None = None) -> None:
        self._notifier = notifier

    @staticmethod
    def classify(failure: FailureRecord) -> Notification:
        """Map ``failure`` to a notification without showing it."""
        envelope = failure.envelope
        if envelope is None:
            return Notification(
                title=GENERIC_ERROR_TITLE, description=GENERIC_ERROR_DESCRIPTION
            )
        return Notification(
            title=status_name(envelope.code),
            description=envelope.message or GENERIC_ERROR_DESCRIPTION,
        )

    def present(self, failure: FailureRecord | BaseException) -> Notification:
        """Classify ``failure`` and hand the result to the notifier.

        Accepts a FailureRecord or any raised exception; exceptions that did
        not come from the transport produce the generic notification.
        """
        if not isinstance(failure, FailureRecord):
            failure = FailureRecord.from_exception(failure)

        notification = self.classify(failure)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Presenting %s for status=%s network=%s",
                notification.title,
                failure.status_code,
                failure.is_network_failure,
            )

        if self._notifier is not None:
            self._notifier.notify(
                notification.title,
                notification.description,
                notification.severity,
                is_closable=notification.is_closable,
            )
        return notification
