from __future__ import annotations

from abc import ABC, abstractmethod


class ISessionCollaborator(ABC):
    """Interface for the external owner of the authenticated session.

    The API client never stores session data; it only asks the owner to
    terminate the session when it can no longer be renewed.
    """

    @abstractmethod
    def logout(self) -> None:
        """Terminate the session and reset any dependent UI state."""
