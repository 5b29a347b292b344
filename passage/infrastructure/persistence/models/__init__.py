"""Database models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from passage.infrastructure.persistence.base import BaseModel, BaseMutableModel
from passage.infrastructure.persistence.models.session import SessionModel
from passage.infrastructure.persistence.models.user import UserModel
from passage.infrastructure.persistence.models.verification_code import (
    VerificationCodeModel,
)

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "SessionModel",
    "UserModel",
    "VerificationCodeModel",
]
