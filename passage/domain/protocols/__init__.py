"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from passage.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from passage.domain.protocols.email_protocol import EmailMessage, EmailProtocol
from passage.domain.protocols.logger_protocol import LoggerProtocol
from passage.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from passage.domain.protocols.token_codec_protocol import TokenCodecProtocol

# Repository protocols
from passage.domain.protocols.session_repository import SessionRepository
from passage.domain.protocols.user_repository import UserRepository
from passage.domain.protocols.verification_code_repository import (
    VerificationCodeRepository,
)

__all__ = [
    # Service protocols
    "EmailMessage",
    "EmailProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenCodecProtocol",
    # Repository protocols
    "SessionRepository",
    "UserRepository",
    "VerificationCodeRepository",
]
