"""
Logging utilities for the API client.

This module provides utilities for logging, including:
- Redaction of session material (cookies, bearer tokens) in log records
- Test/production environment tagging
- structlog loggers routed through the standard logging handlers
"""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import Any, Literal

import structlog


def _is_running_under_pytest() -> bool:
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    """Return 'test' under pytest, 'prod' otherwise."""
    return "test" if _is_running_under_pytest() else "prod"


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds environment tags to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


class EnvironmentTaggingFormatter(logging.Formatter):
    """Logging formatter that includes environment tags."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        if fmt is None:
            fmt = "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
        super().__init__(fmt, datefmt, style=style)

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "env_tag"):
            record.env_tag = _get_environment_tag()
        return super().format(record)


DEFAULT_REDACTED_FIELDS = {
    "cookie",
    "set-cookie",
    "authorization",
    "access_token",
    "refresh_token",
    "password",
}

BEARER_TOKEN_PATTERN = re.compile(r"Bearer\s+([a-zA-Z0-9._~+/-]+=*)")
COOKIE_HEADER_PATTERN = re.compile(
    r"((?:set-)?cookie['\"]?\s*[:=]\s*['\"]?)([^'\"\n]+)", re.IGNORECASE
)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore


def redact(value: str, mask: str = "***") -> str:
    """Redact a sensitive value, keeping two characters at each end."""
    if not value:
        return value
    if len(value) > 6:
        return f"{value[0:2]}{mask}{value[-2:]}"
    return mask


def redact_headers(
    headers: Any, redacted_fields: set[str] | None = None, mask: str = "***"
) -> dict[str, str]:
    """Return a plain dict copy of ``headers`` with session material masked."""
    if redacted_fields is None:
        redacted_fields = DEFAULT_REDACTED_FIELDS
    result: dict[str, str] = {}
    for key, value in dict(headers or {}).items():
        result[key] = redact(str(value), mask) if key.lower() in redacted_fields else value
    return result


class SensitiveHeaderRedactionFilter(logging.Filter):
    """Logging filter that masks cookie and bearer material in log records.

    Sanitizes ``record.msg`` and ``record.args`` (strings or containers of
    strings).
    """

    def __init__(self, mask: str = "***") -> None:
        super().__init__()
        self.mask = mask

    def _sanitize(self, obj: object) -> object:
        if isinstance(obj, str):
            s = BEARER_TOKEN_PATTERN.sub(f"Bearer {self.mask}", obj)
            return COOKIE_HEADER_PATTERN.sub(rf"\1{self.mask}", s)
        if isinstance(obj, dict):
            return {
                k: (
                    self.mask
                    if isinstance(k, str) and k.lower() in DEFAULT_REDACTED_FIELDS
                    else self._sanitize(v)
                )
                for k, v in obj.items()
            }
        if isinstance(obj, list | tuple):
            return type(obj)(self._sanitize(v) for v in obj)
        return obj

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if isinstance(record.msg, str):
            record.msg = self._sanitize(record.msg)  # type: ignore[assignment]
        if record.args:
            if isinstance(record.args, dict):
                record.args = self._sanitize(record.args)  # type: ignore[assignment]
            elif isinstance(record.args, tuple):
                record.args = tuple(self._sanitize(a) for a in record.args)
        return True


def _install_filter(filter_instance: logging.Filter) -> None:
    root = logging.getLogger()
    root.addFilter(filter_instance)
    for handler in list(root.handlers):
        handler.addFilter(filter_instance)


def configure_structlog() -> None:
    """Route structlog loggers through the standard logging handlers."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["event"], drop_missing=True
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging_with_environment_tagging(
    level: int = logging.INFO,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Configure logging with environment tagging and session redaction.

    Args:
        level: Logging level
        log_format: Optional log format string
        log_file: Optional log file path
    """
    formatter = EnvironmentTaggingFormatter(fmt=log_format)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    _install_filter(EnvironmentTaggingFilter())
    _install_filter(SensitiveHeaderRedactionFilter())
    # httpx logs every request at INFO, including full URLs.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    configure_structlog()
