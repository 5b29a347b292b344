"""Persistence adapters (SQLAlchemy async)."""

from passage.infrastructure.persistence.database import Database

__all__ = ["Database"]
