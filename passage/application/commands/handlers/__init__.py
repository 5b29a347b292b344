"""Command handlers (CQRS write side)."""

from passage.application.commands.handlers.login_user_handler import LoginUserHandler
from passage.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from passage.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from passage.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from passage.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from passage.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from passage.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "LoginUserHandler",
    "LogoutUserHandler",
    "RefreshAccessTokenHandler",
    "RegisterUserHandler",
    "RequestPasswordResetHandler",
    "ResetPasswordHandler",
    "VerifyEmailHandler",
]
