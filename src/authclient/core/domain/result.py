"""Explicit success/failure variants returned by the convenience fetch path.

``Ok`` carries the envelope's ``data``; ``Err`` carries the failure and the
notification that was shown for it, so an empty successful result can never
be mistaken for a failed call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from authclient.core.domain.failure import FailureRecord
from authclient.core.domain.notification import Notification

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T | None

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T | None:
        return self.value


@dataclass(frozen=True)
class Err:
    failure: FailureRecord
    notification: Notification | None = None

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_network_failure(self) -> bool:
        return self.failure.is_network_failure

    def unwrap(self) -> NoReturn:
        """Re-raise the original error."""
        raise self.failure.error


Result = Union[Ok[T], Err]
