from __future__ import annotations

import json
import logging
from typing import Any, Generic, TypeVar

import httpx
from pydantic import ValidationError

from authclient.core.domain.model_bases import DomainModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResponseEnvelope(DomainModel, Generic[T]):
    """Uniform ``{code, message, data}`` wrapper carried by every API reply.

    ``data`` is populated on success and empty on failure paths; that is a
    backend convention and is not enforced here.
    """

    code: int = 0
    message: str = ""
    data: T | None = None


def parse_envelope(payload: Any) -> ResponseEnvelope[Any] | None:
    """Build an envelope from a decoded JSON payload.

    Returns None when the payload is not a JSON object or does not fit the
    envelope shape.
    """
    if not isinstance(payload, dict):
        return None
    try:
        return ResponseEnvelope[Any].model_validate(payload)
    except ValidationError as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Payload does not fit the response envelope: %s", e)
        return None


def envelope_from_response(response: httpx.Response) -> ResponseEnvelope[Any] | None:
    """Decode an httpx response body into an envelope, tolerating bad bodies."""
    if not response.content:
        return None
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Response body from %s is not JSON: %s", response.request.url, e
            )
        return None
    return parse_envelope(payload)
