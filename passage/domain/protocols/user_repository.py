"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from passage.core.errors import ConflictError
from passage.core.result import Result
from passage.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Mutations are explicit calls (mark_verified, update_password); there is
    no save-on-mutate.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        """Find user whose username or email equals identifier.

        Args:
            identifier: Username or email as typed at login.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address."""
        ...

    async def exists_by_username(self, username: str) -> bool:
        """Check if a user with this username exists."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists."""
        ...

    async def save(self, user: User) -> Result[User, ConflictError]:
        """Create new user.

        Uniqueness is ultimately enforced by the store: a concurrent signup
        that slips past the existence checks fails here.

        Returns:
            Success(user) or Failure(ConflictError) on a duplicate
            username or email.
        """
        ...

    async def mark_verified(self, user_id: UUID) -> User | None:
        """Set is_verified on the user.

        Returns:
            Updated user, or None if no such user.
        """
        ...

    async def update_password(self, user_id: UUID, password_hash: str) -> User | None:
        """Replace the user's password hash.

        Returns:
            Updated user, or None if no such user.
        """
        ...
