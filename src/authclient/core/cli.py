"""
Command line entry point: fetch one API path through the authenticated client.

Prints the response data as JSON on success, or the error notification on
failure. Session cookies can be seeded with ``--cookie name=value``.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence

import httpx

from authclient.core.app.application_factory import build_api_client
from authclient.core.common.exceptions import ConfigurationError
from authclient.core.common.logging_utils import (
    configure_logging_with_environment_tagging,
)
from authclient.core.config.app_config import ClientConfig, LogLevel, load_config
from authclient.core.interfaces.session_interface import ISessionCollaborator

logger = logging.getLogger(__name__)


class CliSession(ISessionCollaborator):
    """Session owner for one-shot CLI runs; logout only records the request."""

    def __init__(self) -> None:
        self.logged_out = False

    def logout(self) -> None:
        self.logged_out = True
        logger.warning("Session expired and could not be refreshed; log in again")


def _parse_cookie(value: str) -> tuple[str, str]:
    name, sep, cookie_value = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(
            f"Invalid cookie {value!r}; expected NAME=VALUE"
        )
    return name.strip(), cookie_value


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authclient",
        description="GET an API path through the session-refreshing client",
    )
    parser.add_argument("path", help="API path, e.g. /users/me")
    parser.add_argument("--base-url", help="API base URL (env: API_BASE_URL)")
    parser.add_argument(
        "--refresh-path", help="Session refresh path (env: API_REFRESH_PATH)"
    )
    parser.add_argument(
        "--timeout", type=float, help="Request timeout in seconds (env: API_TIMEOUT)"
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Logging level (env: LOG_LEVEL)",
    )
    parser.add_argument(
        "--cookie",
        action="append",
        type=_parse_cookie,
        default=[],
        metavar="NAME=VALUE",
        help="Session cookie to send; may be repeated",
    )
    return parser


def apply_cli_args(config: ClientConfig, args: argparse.Namespace) -> ClientConfig:
    """Return ``config`` with any values given on the command line applied."""
    overrides = {
        "base_url": args.base_url,
        "refresh_path": args.refresh_path,
        "timeout": args.timeout,
        "log_level": args.log_level,
    }
    values = config.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return load_config(values)


async def run_fetch(
    config: ClientConfig,
    path: str,
    *,
    cookies: Sequence[tuple[str, str]] = (),
    http_client: httpx.AsyncClient | None = None,
) -> int:
    session = CliSession()
    async with build_api_client(
        config, session=session, http_client=http_client
    ) as api:
        for name, value in cookies:
            api.transport.client.cookies.set(name, value)

        result = await api.fetcher.fetch(path)
        if result.is_ok:
            print(json.dumps(result.value, indent=2, ensure_ascii=False))
            return 0

        notification = result.notification
        if notification is not None:
            print(f"{notification.title}: {notification.description}", file=sys.stderr)
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_cli_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_cli_args(ClientConfig.from_env(), args)
    except ConfigurationError as e:
        parser.error(f"{e.message}: {e.details.get('errors', '')}")

    configure_logging_with_environment_tagging(
        level=getattr(logging, config.log_level.value)
    )
    return asyncio.run(run_fetch(config, args.path, cookies=args.cookie))


if __name__ == "__main__":
    sys.exit(main())
