"""Command definitions (CQRS write side)."""

from passage.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
    ResetPassword,
    VerifyEmail,
)

__all__ = [
    "LoginUser",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RequestPasswordReset",
    "ResetPassword",
    "VerifyEmail",
]
