"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for rows that are updated after insert

Domain entities do NOT inherit from these; repositories map between the two.

Architecture:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at)
        │   ├── UserModel
        │   └── SessionModel
        └── VerificationCodeModel (insert then delete, never updated)
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Declarative base with a UUID primary key and creation timestamp.

    Repositories set ``created_at`` explicitly from the domain entity; the
    server default only covers rows inserted by other means.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds ``updated_at``, refreshed by the database on UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base for models that are updated after creation.

    Provides id, created_at and updated_at with the mixin order fixed here.
    """

    __abstract__ = True
