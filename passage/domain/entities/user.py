"""User domain entity for authentication.

Pure business logic, no framework dependencies.

The password hash lives on the entity but never leaves the core: flows
return the public view (see ``passage.application.dtos.PublicUser``).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """User domain entity.

    Business Rules:
        - Username and email are unique across all users
        - Password is stored only as a one-way hash
        - New users start unverified; verification flips is_verified once
        - Users are never deleted by the auth core

    Attributes:
        id: Unique user identifier
        name: Display name
        username: Unique handle
        email: Unique email address (lowercased by request validation)
        password_hash: Bcrypt hashed password (never plaintext)
        is_verified: Email verification status
        avatar: Optional avatar URL
        banner: Optional banner URL
        bio: Optional profile text
        location: Optional profile location
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     name="Alice",
        ...     username="alice",
        ...     email="a@x.com",
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.is_verified
        False
    """

    id: UUID
    name: str
    username: str
    email: str
    password_hash: str  # Never store plaintext passwords
    is_verified: bool = False
    avatar: str | None = None
    banner: str | None = None
    bio: str | None = None
    location: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
