"""SQLAlchemy repository adapters."""

from passage.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)
from passage.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from passage.infrastructure.persistence.repositories.verification_code_repository import (
    VerificationCodeRepository,
)

__all__ = ["SessionRepository", "UserRepository", "VerificationCodeRepository"]
