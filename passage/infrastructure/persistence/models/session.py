"""Session table.

One row per logged-in device. Refresh tokens carry the row id; deleting the
row invalidates every refresh token minted for it.

Foreign Keys:
    - user_id: References users(id) ON DELETE CASCADE
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from passage.infrastructure.persistence.base import BaseMutableModel


class SessionModel(BaseMutableModel):
    """Authenticated session row."""

    __tablename__ = "sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this session",
    )

    user_agent: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        comment="Client user agent captured at login",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Sliding expiry (only ever moves forward)",
    )
