"""Verification code table.

Rows are inserted on issue and deleted on redemption. The unique index on
``code`` makes a lookup hit at most one row; the delete's row count tells
concurrent redeemers which one won.

Indexes:
    - code: unique, for link lookups
    - (user_id, purpose, created_at): for the reset rate-limit count
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from passage.infrastructure.persistence.base import BaseModel


class VerificationCodeModel(BaseModel):
    """Single-use code row."""

    __tablename__ = "verification_codes"
    __table_args__ = (
        Index(
            "idx_verification_codes_user_purpose_created",
            "user_id",
            "purpose",
            "created_at",
        ),
    )

    code: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        comment="Random hex code carried in links",
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="User the code was issued to",
    )

    purpose: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="email_verification or password_reset",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
