"""Authentication DTOs (Data Transfer Objects).

Response dataclasses carried from handlers back to the presentation layer.

DTOs:
    - PublicUser: User without credential fields
    - AuthResult: Result of signup and login
    - RefreshResult: Result of refresh
    - PasswordResetLink: Result of forgot-password
    - AuthContext: Result of access token authentication
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from passage.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class PublicUser:
    """User as returned to clients.

    Carries no credential fields.
    """

    id: UUID
    name: str
    username: str
    email: str
    is_verified: bool
    avatar: str | None
    banner: str | None
    bio: str | None
    location: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "PublicUser":
        """Build the public view of a user entity."""
        return cls(
            id=user.id,
            name=user.name,
            username=user.username,
            email=user.email,
            is_verified=user.is_verified,
            avatar=user.avatar,
            banner=user.banner,
            bio=user.bio,
            location=user.location,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthResult:
    """Response from signup and login.

    Attributes:
        user: Public user view.
        access_token: Short-lived access token.
        refresh_token: Long-lived refresh token bound to the new session.
    """

    user: PublicUser
    access_token: str
    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RefreshResult:
    """Response from refresh.

    Attributes:
        access_token: Newly minted access token (always present).
        refresh_token: New refresh token, only when the session was renewed.
    """

    access_token: str
    refresh_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class PasswordResetLink:
    """Response from forgot-password.

    Attributes:
        url: Reset link sent to the user.
        email_id: Message id reported by the notifier.
    """

    url: str
    email_id: str


@dataclass(frozen=True, kw_only=True)
class AuthContext:
    """Identity resolved from a valid access token."""

    user_id: UUID
    session_id: UUID
