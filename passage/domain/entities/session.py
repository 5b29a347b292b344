"""Session domain entity for sliding-window session management.

Pure business logic, no framework dependencies.

A session represents one authenticated device or browser. Refresh tokens
reference a session by id; a refresh token is only usable while its session
exists and has not expired.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class Session:
    """Session domain entity.

    Business Rules:
        - Session is active while expires_at is in the future
        - Expiry never moves backwards while the session is active
        - Renewal happens only as a side effect of a refresh, and only when
          the session is close to lapsing
        - An expired session is never revived

    Attributes:
        id: Unique session identifier (embedded in both token types).
        user_id: User who owns this session.
        user_agent: Client user agent captured at login.
        created_at: When session was created.
        expires_at: When session expires.

    Example:
        >>> now = datetime.now(UTC)
        >>> session = Session(
        ...     id=uuid7(),
        ...     user_id=uuid7(),
        ...     created_at=now,
        ...     expires_at=now + timedelta(days=30),
        ... )
        >>> session.is_active()
        True
        >>> session.needs_renewal(timedelta(days=1))
        False
    """

    id: UUID
    user_id: UUID
    user_agent: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime

    def is_active(self, now: datetime | None = None) -> bool:
        """Check if session has not expired.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if expires_at is strictly in the future.
        """
        now = now or datetime.now(UTC)
        return self.expires_at > now

    def remaining(self, now: datetime | None = None) -> timedelta:
        """Time left before the session expires (negative once expired)."""
        now = now or datetime.now(UTC)
        return self.expires_at - now

    def needs_renewal(
        self, threshold: timedelta, now: datetime | None = None
    ) -> bool:
        """Check whether the session is close enough to lapsing to renew.

        Args:
            threshold: Remaining lifetime at or below which renewal applies.
            now: Reference time (defaults to current UTC time).

        Returns:
            True if ``expires_at - now <= threshold``.
        """
        return self.remaining(now) <= threshold

    def extend(self, lifetime: timedelta, now: datetime | None = None) -> datetime:
        """Slide the expiry to ``now + lifetime``.

        Expiry is monotonically non-decreasing: if the current expiry is
        already later than the new one it is kept.

        Args:
            lifetime: New lifetime measured from now.
            now: Reference time (defaults to current UTC time).

        Returns:
            The resulting expires_at.
        """
        now = now or datetime.now(UTC)
        self.expires_at = max(self.expires_at, now + lifetime)
        return self.expires_at
