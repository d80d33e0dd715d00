from __future__ import annotations

from abc import ABC, abstractmethod


class INotifier(ABC):
    """Interface for the component that shows user-facing messages."""

    @abstractmethod
    def notify(
        self,
        title: str,
        description: str,
        severity: str = "error",
        *,
        is_closable: bool = True,
    ) -> None:
        """Show a message to the user.

        Args:
            title: Short headline, typically a status name
            description: Longer human-readable explanation
            severity: Message severity; the client only emits "error"
            is_closable: Whether the user can dismiss the message
        """
