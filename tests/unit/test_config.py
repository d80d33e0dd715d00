from __future__ import annotations

import pytest
from authclient.core.common.exceptions import ConfigurationError
from authclient.core.config.app_config import ClientConfig, LogLevel, load_config


def test_defaults_point_at_local_backend() -> None:
    config = ClientConfig.from_env({})

    assert config.base_url == "http://localhost:8080"
    assert config.refresh_path == "/auth/refresh"
    assert config.timeout is None
    assert config.log_level is LogLevel.INFO


def test_environment_overrides() -> None:
    config = ClientConfig.from_env(
        {
            "API_BASE_URL": "https://api.example.com/",
            "API_REFRESH_PATH": "session/refresh",
            "API_TIMEOUT": "2.5",
            "LOG_LEVEL": "debug",
        }
    )

    assert config.base_url == "https://api.example.com"
    assert config.refresh_path == "/session/refresh"
    assert config.timeout == 2.5
    assert config.log_level is LogLevel.DEBUG


def test_blank_base_url_uses_default() -> None:
    assert ClientConfig.from_env({"API_BASE_URL": "  "}).base_url == (
        "http://localhost:8080"
    )


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://backend:9000")

    assert ClientConfig.from_env().base_url == "http://backend:9000"


@pytest.mark.parametrize("value", ["soon", "", "nan-ish"])
def test_invalid_timeout_falls_back_to_no_timeout(value: str) -> None:
    assert ClientConfig.from_env({"API_TIMEOUT": value}).timeout is None


def test_non_positive_timeout_disables_timeout() -> None:
    assert ClientConfig(timeout=0).timeout is None


def test_invalid_log_level_falls_back() -> None:
    assert ClientConfig.from_env({"LOG_LEVEL": "chatty"}).log_level is LogLevel.INFO


def test_invalid_base_url_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        ClientConfig.from_env({"API_BASE_URL": "ftp://files.example.com"})

    assert "Invalid API base URL" in exc_info.value.details["errors"]


def test_load_config_accepts_mapping() -> None:
    config = load_config({"base_url": "http://api.test", "timeout": 5})

    assert config.base_url == "http://api.test"
    assert config.timeout == 5.0


def test_config_is_immutable() -> None:
    config = ClientConfig()

    with pytest.raises(ValueError):
        config.base_url = "http://elsewhere"  # type: ignore[misc]
