"""User table.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - username and email carry unique indexes; they are the final guard
      against two concurrent signups claiming the same identity
"""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from passage.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User account row.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        name: Display name
        username: Unique handle (case-sensitive)
        email: Unique email address (lowercase)
        password_hash: Bcrypt hash
        is_verified: Email verification status
        avatar, banner, bio, location: Optional profile fields
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(50), nullable=False)

    username: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique handle",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    is_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Email verification status",
    )

    avatar: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    banner: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<UserModel("
            f"id={self.id}, "
            f"username={self.username!r}, "
            f"is_verified={self.is_verified}"
            f")>"
        )
