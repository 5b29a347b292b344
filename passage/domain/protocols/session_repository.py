"""Session repository protocol for persistence abstraction."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from passage.domain.entities.session import Session


class SessionRepository(Protocol):
    """Session repository protocol (port) for persistence.

    Example:
        >>> class PostgresSessionRepository:
        ...     async def save(self, session: Session) -> None:
        ...         ...
        >>> # implements SessionRepository via structural typing
    """

    async def save(self, session: Session) -> None:
        """Persist a new session."""
        ...

    async def find_by_id(self, session_id: UUID) -> Session | None:
        """Find session by ID (expired sessions included).

        Returns:
            Session if found, None otherwise.
        """
        ...

    async def update_expiry(self, session_id: UUID, expires_at: datetime) -> bool:
        """Set a new expiry on the session.

        Returns:
            True if a session was updated, False if it no longer exists.
        """
        ...

    async def delete(self, session_id: UUID) -> bool:
        """Delete a session.

        Returns:
            True if a session was removed, False if none existed.
        """
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every session owned by user.

        Returns:
            Number of sessions removed.
        """
        ...
