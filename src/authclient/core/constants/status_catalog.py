"""Closed catalog of backend status codes and their symbolic names.

The symbolic name is used as the title of user-facing error notifications.
"""

from __future__ import annotations

from enum import IntEnum

from authclient.core.constants.message_constants import GENERIC_ERROR_TITLE


class StatusCatalog(IntEnum):
    SUCCESS = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    VALIDATION_ERROR = 422
    INTERNAL_SERVER_ERROR = 500


def status_name(code: int | None, fallback: str = GENERIC_ERROR_TITLE) -> str:
    """Return the symbolic name for ``code``.

    Total over every input: absent, zero and out-of-catalog codes resolve
    to ``fallback``.
    """
    if not code:
        return fallback
    try:
        return StatusCatalog(code).name
    except ValueError:
        return fallback
