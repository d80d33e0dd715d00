import logging
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from authclient.core.app.application_factory import ApiClient, build_api_client
from authclient.core.config.app_config import ClientConfig
from authclient.core.transport.http_client import TransportClient

from tests.unit.fakes import TEST_BASE_URL, RecordingNotifier, RecordingSession


@pytest.fixture(autouse=True)
def _configure_logging_for_tests() -> None:
    """Configure logging for every unit test so redaction filters are active."""
    from authclient.core.common.logging_utils import (
        configure_logging_with_environment_tagging,
    )

    configure_logging_with_environment_tagging(level=logging.DEBUG)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=TEST_BASE_URL)


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest_asyncio.fixture
async def api(
    config: ClientConfig, session: RecordingSession, notifier: RecordingNotifier
) -> AsyncIterator[ApiClient]:
    client = build_api_client(config, session=session, notifier=notifier)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def transport(config: ClientConfig) -> AsyncIterator[TransportClient]:
    async with TransportClient(config) as client:
        yield client
