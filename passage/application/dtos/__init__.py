"""Application DTOs."""

from passage.application.dtos.auth_dtos import (
    AuthContext,
    AuthResult,
    PasswordResetLink,
    PublicUser,
    RefreshResult,
)

__all__ = [
    "AuthContext",
    "AuthResult",
    "PasswordResetLink",
    "PublicUser",
    "RefreshResult",
]
