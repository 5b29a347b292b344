"""Application services shared by the auth handlers."""

from passage.application.services.session_manager import SessionManager
from passage.application.services.token_issuer import TokenIssuer, claim_uuid
from passage.application.services.verification_code_service import (
    VerificationCodeService,
    code_prefix,
)

__all__ = [
    "SessionManager",
    "TokenIssuer",
    "VerificationCodeService",
    "claim_uuid",
    "code_prefix",
]
