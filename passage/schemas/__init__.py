"""Request and response schemas."""

from passage.schemas.auth_schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    ResetPasswordRequest,
    SignupRequest,
    UserResponse,
    VerifyEmailRequest,
)

__all__ = [
    "ForgotPasswordRequest",
    "LoginRequest",
    "MessageResponse",
    "ResetPasswordRequest",
    "SignupRequest",
    "UserResponse",
    "VerifyEmailRequest",
]
