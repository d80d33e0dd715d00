from __future__ import annotations

from dataclasses import dataclass

from authclient.core.constants.message_constants import NOTIFICATION_SEVERITY_ERROR


@dataclass(frozen=True)
class Notification:
    """User-facing message describing an error outcome."""

    title: str
    description: str
    severity: str = NOTIFICATION_SEVERITY_ERROR
    is_closable: bool = True
