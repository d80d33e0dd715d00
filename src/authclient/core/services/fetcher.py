from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from authclient.core.common.exceptions import ApiClientError
from authclient.core.domain.failure import FailureRecord
from authclient.core.domain.result import Err, Ok, Result
from authclient.core.services.error_presenter import ErrorPresenter
from authclient.core.transport.http_client import TransportClient

logger = logging.getLogger(__name__)


class Fetcher:
    """Read-only GET accessor that reports failures instead of raising."""

    def __init__(self, transport: TransportClient, presenter: ErrorPresenter) -> None:
        self._transport = transport
        self._presenter = presenter

    async def fetch(
        self, path: str, *, params: Mapping[str, Any] | None = None
    ) -> Result[Any]:
        """GET ``path`` and return ``Ok(data)``.

        On any failure the error is presented to the user and returned as
        ``Err(failure, notification)``; this method never raises.
        """
        try:
            envelope = await self._transport.get(path, params=params)
        except ApiClientError as e:
            return self._fail(e)
        except Exception as e:
            logger.warning("Unexpected error fetching %s: %s", path, e, exc_info=True)
            return self._fail(e)
        return Ok(envelope.data)

    def _fail(self, error: Exception) -> Err:
        failure = FailureRecord.from_exception(error)
        return Err(failure, self._presenter.present(failure))

    __call__ = fetch
