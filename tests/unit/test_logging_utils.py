from __future__ import annotations

import logging

import pytest
from authclient.core.common.logging_utils import (
    EnvironmentTaggingFormatter,
    SensitiveHeaderRedactionFilter,
    get_logger,
    redact,
    redact_headers,
)
from authclient.core.services.notifiers import LoggingNotifier


def _record(msg: str, args: tuple | dict | None = None) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


def test_redact_keeps_edges() -> None:
    assert redact("abcdefghij") == "ab***ij"
    assert redact("short") == "***"
    assert redact("") == ""


def test_redact_headers_masks_session_material() -> None:
    headers = {
        "Cookie": "session=abcdefghijk",
        "Authorization": "Bearer abcdefghijk",
        "Accept": "application/json",
    }

    redacted = redact_headers(headers)

    assert redacted["Cookie"] == "se***jk"
    assert redacted["Authorization"] == "Be***jk"
    assert redacted["Accept"] == "application/json"


def test_filter_masks_bearer_and_cookie_in_message() -> None:
    record = _record("sent Authorization: Bearer abc.def.ghi with cookie: session=xyz")

    SensitiveHeaderRedactionFilter().filter(record)

    assert "abc.def.ghi" not in record.getMessage()
    assert "session=xyz" not in record.getMessage()


def test_filter_masks_args() -> None:
    record = _record("headers %s", ({"Cookie": "session=xyz", "Accept": "*/*"},))

    SensitiveHeaderRedactionFilter().filter(record)

    message = record.getMessage()
    assert "session=xyz" not in message
    assert "*/*" in message


def test_formatter_adds_test_environment_tag() -> None:
    formatter = EnvironmentTaggingFormatter(fmt="[%(env_tag)s] %(message)s")

    assert formatter.format(_record("hello")) == "[test] hello"


def test_get_logger_returns_structlog_logger() -> None:
    logger = get_logger("authclient.test")

    assert hasattr(logger, "bind")


def test_logging_notifier_writes_structured_record(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.ERROR, logger="authclient.notifications"):
        LoggingNotifier().notify("NOT_FOUND", "No such user")

    assert "NOT_FOUND" in caplog.text
    assert "No such user" in caplog.text
