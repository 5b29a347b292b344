"""Session manager: creation, lookup, sliding renewal and invalidation.

Sessions use a sliding window. A refresh made while less than
``renewal_threshold`` remains pushes the expiry out to ``now + lifetime``.
Sessions past their expiry are never revived; they are simply treated as
absent.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from passage.core.enums import ErrorCode
from passage.core.errors import AuthenticationError
from passage.core.result import Failure, Result, Success
from passage.domain.entities import Session
from passage.domain.protocols import LoggerProtocol, SessionRepository

DEFAULT_SESSION_LIFETIME = timedelta(days=30)
DEFAULT_RENEWAL_THRESHOLD = timedelta(days=1)
MAX_USER_AGENT_LENGTH = 512


class SessionManager:
    """Owns the session lifecycle on top of a SessionRepository."""

    def __init__(
        self,
        session_repo: SessionRepository,
        logger: LoggerProtocol,
        lifetime: timedelta = DEFAULT_SESSION_LIFETIME,
        renewal_threshold: timedelta = DEFAULT_RENEWAL_THRESHOLD,
    ) -> None:
        """Initialize session manager.

        Args:
            session_repo: Session persistence.
            logger: Structured logger.
            lifetime: Session lifetime, also the extension applied on renewal.
            renewal_threshold: Remaining lifetime at or below which a
                refresh renews the session.
        """
        self._session_repo = session_repo
        self._logger = logger
        self._lifetime = lifetime
        self._renewal_threshold = renewal_threshold

    async def create(self, user_id: UUID, user_agent: str | None) -> Session:
        """Open a session expiring ``lifetime`` from now.

        The user agent is cut to MAX_USER_AGENT_LENGTH characters.
        """
        now = datetime.now(UTC)
        if user_agent is not None:
            user_agent = user_agent[:MAX_USER_AGENT_LENGTH]
        session = Session(
            id=uuid7(),
            user_id=user_id,
            user_agent=user_agent,
            created_at=now,
            expires_at=now + self._lifetime,
        )
        await self._session_repo.save(session)
        self._logger.info(
            "session_created",
            session_id=str(session.id),
            user_id=str(user_id),
        )
        return session

    async def find_active(
        self, session_id: UUID
    ) -> Result[Session, AuthenticationError]:
        """Load a session that exists and has not expired.

        Returns:
            Success(session), or Failure(AuthenticationError) when the
            session is absent or expired.
        """
        session = await self._session_repo.find_by_id(session_id)
        if session is None or not session.is_active():
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.SESSION_EXPIRED,
                    message="Session not found or expired",
                )
            )
        return Success(value=session)

    async def renew_if_near_expiry(
        self, session: Session
    ) -> Result[tuple[Session, bool], AuthenticationError]:
        """Extend the session when it is close to lapsing.

        When ``expires_at - now <= renewal_threshold`` the expiry is set to
        ``now + lifetime`` and persisted. Otherwise nothing changes.

        Returns:
            Success((session, rotated)) where rotated tells whether the
            expiry moved. Failure(AuthenticationError) if the session was
            deleted between lookup and renewal.
        """
        now = datetime.now(UTC)
        if not session.needs_renewal(self._renewal_threshold, now):
            return Success(value=(session, False))

        expires_at = session.extend(self._lifetime, now)
        updated = await self._session_repo.update_expiry(session.id, expires_at)
        if not updated:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.SESSION_EXPIRED,
                    message="Session not found or expired",
                )
            )

        self._logger.info(
            "session_renewed",
            session_id=str(session.id),
            expires_at=expires_at.isoformat(),
        )
        return Success(value=(session, True))

    async def delete(self, session_id: UUID) -> bool:
        """Delete a session. Deleting an absent session is not an error."""
        deleted = await self._session_repo.delete(session_id)
        if deleted:
            self._logger.info("session_deleted", session_id=str(session_id))
        return deleted

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every session of a user, returning how many were removed."""
        count = await self._session_repo.delete_all_for_user(user_id)
        self._logger.info(
            "sessions_deleted_for_user",
            user_id=str(user_id),
            count=count,
        )
        return count
