"""Session store port - Narrow key-value interface for travel sessions.

Implementation: adapters/sessions/memory_store.py (InMemorySessionStore)

Any externally owned key-value store can implement this contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.schemas import TravelSession, TravelSessionData


class SessionStorePort(Protocol):
    """Port for travel session storage."""

    def create(self, data: TravelSessionData) -> str:
        """Store a new session.

        Args:
            data: Initial session content.

        Returns:
            The opaque identifier of the new session.
        """
        ...

    def get(self, session_id: str) -> Optional[TravelSession]:
        """Get a session by identifier.

        Returns:
            The session, or None if unknown.
        """
        ...

    def update(self, session_id: str, changes: Mapping[str, Any]) -> TravelSession:
        """Apply a partial update to a session.

        Args:
            session_id: The session to update.
            changes: Field names (snake_case) mapped to new values.

        Returns:
            The updated session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        ...
