"""Domain entities."""

from passage.domain.entities.session import Session
from passage.domain.entities.user import User
from passage.domain.entities.verification_code import VerificationCode

__all__ = ["Session", "User", "VerificationCode"]
