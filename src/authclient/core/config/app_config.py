from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from authclient.core.common.exceptions import ConfigurationError
from authclient.core.constants.message_constants import (
    CONFIG_INVALID_BASE_URL_ERROR,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_REFRESH_PATH = "/auth/refresh"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _env_to_str(name: str, default: str, env: Mapping[str, str]) -> str:
    """Return a non-blank environment variable, or ``default``."""
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_to_float(
    name: str, default: float | None, env: Mapping[str, str]
) -> float | None:
    """Return an environment variable parsed as a float."""
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s=%r; using %s", name, value, default)
        return default


def _env_to_log_level(name: str, default: LogLevel, env: Mapping[str, str]) -> LogLevel:
    value = env.get(name)
    if value is None:
        return default
    try:
        return LogLevel(value.strip().upper())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", name, value, default.value)
        return default


class ClientConfig(BaseModel):
    """Configuration for the authenticated API client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    refresh_path: str = DEFAULT_REFRESH_PATH
    # None disables timeouts entirely; a hung call hangs its caller.
    timeout: float | None = None
    log_level: LogLevel = LogLevel.INFO

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(CONFIG_INVALID_BASE_URL_ERROR.format(value=value))
        return stripped

    @field_validator("refresh_path")
    @classmethod
    def _validate_refresh_path(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith("/") else f"/{value}"

    @field_validator("timeout")
    @classmethod
    def _validate_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            return None
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a configuration from environment variables.

        Recognised variables: ``API_BASE_URL``, ``API_REFRESH_PATH``,
        ``API_TIMEOUT`` and ``LOG_LEVEL``. Unset values use the defaults.
        """
        env = os.environ if environ is None else environ
        return load_config(
            {
                "base_url": _env_to_str("API_BASE_URL", DEFAULT_BASE_URL, env),
                "refresh_path": _env_to_str(
                    "API_REFRESH_PATH", DEFAULT_REFRESH_PATH, env
                ),
                "timeout": _env_to_float("API_TIMEOUT", None, env),
                "log_level": _env_to_log_level("LOG_LEVEL", LogLevel.INFO, env),
            }
        )


def load_config(values: Mapping[str, Any] | None = None) -> ClientConfig:
    """Validate ``values`` into a ClientConfig, raising ConfigurationError."""
    try:
        return ClientConfig(**dict(values or {}))
    except ValueError as e:
        raise ConfigurationError(
            "Invalid client configuration", details={"errors": str(e)}
        ) from e
