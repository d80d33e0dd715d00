"""Constants shared across the API client."""

from authclient.core.constants.message_constants import (
    GENERIC_ERROR_DESCRIPTION,
    GENERIC_ERROR_TITLE,
)
from authclient.core.constants.status_catalog import StatusCatalog, status_name

__all__ = [
    "GENERIC_ERROR_DESCRIPTION",
    "GENERIC_ERROR_TITLE",
    "StatusCatalog",
    "status_name",
]
