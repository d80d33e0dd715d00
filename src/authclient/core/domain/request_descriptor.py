from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class RequestDescriptor:
    """Captured shape of an outbound call.

    Built before the call is sent and attached to any failure it produces,
    so the exact same call can be replayed once the session is renewed.
    """

    method: str
    path: str
    params: Mapping[str, Any] | None = None
    json: Any = None
    headers: Mapping[str, str] | None = None
    with_credentials: bool = True
    is_replay: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    def as_replay(self) -> RequestDescriptor:
        """Return a copy marked as the single replay of this call."""
        return replace(self, is_replay=True)

    def describe(self) -> str:
        suffix = " (replay)" if self.is_replay else ""
        return f"{self.method} {self.path}{suffix}"
