from __future__ import annotations

from authclient.core.common.logging_utils import get_logger
from authclient.core.interfaces.notifier_interface import INotifier


class LoggingNotifier(INotifier):
    """Notifier that writes notifications to a structured log.

    Used when no user-facing presentation layer is wired in, e.g. from the
    command line.
    """

    def __init__(self, name: str = "authclient.notifications") -> None:
        self.logger = get_logger(name)

    def notify(
        self,
        title: str,
        description: str,
        severity: str = "error",
        *,
        is_closable: bool = True,
    ) -> None:
        self.logger.error(
            "notification",
            title=title,
            description=description,
            severity=severity,
            is_closable=is_closable,
        )
