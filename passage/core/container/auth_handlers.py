"""Authentication handler factories.

Request-scoped: each factory takes the request's ``AsyncSession``, builds
repositories on it and wires them with the application-scoped singletons.

Usage:
    async with get_db_session() as session:
        handler = get_register_user_handler(session)
        result = await handler.handle(cmd)
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from passage.application.services import (
    SessionManager,
    TokenIssuer,
    VerificationCodeService,
)
from passage.core.config import get_settings
from passage.core.container.infrastructure import (
    get_email_service,
    get_logger,
    get_password_service,
    get_token_codec,
)
from passage.infrastructure.persistence.repositories import (
    SessionRepository,
    UserRepository,
    VerificationCodeRepository,
)

if TYPE_CHECKING:
    from passage.application.commands.handlers import (
        LoginUserHandler,
        LogoutUserHandler,
        RefreshAccessTokenHandler,
        RegisterUserHandler,
        RequestPasswordResetHandler,
        ResetPasswordHandler,
        VerifyEmailHandler,
    )
    from passage.application.queries.handlers import (
        AuthenticateAccessTokenHandler,
        GetUserHandler,
    )


# ============================================================================
# Shared Services
# ============================================================================


def get_session_manager(session: AsyncSession) -> SessionManager:
    settings = get_settings()
    return SessionManager(
        session_repo=SessionRepository(session=session),
        logger=get_logger(),
        lifetime=settings.session_lifetime,
        renewal_threshold=settings.session_renewal_threshold,
    )


def get_verification_code_service(session: AsyncSession) -> VerificationCodeService:
    return VerificationCodeService(
        code_repo=VerificationCodeRepository(session=session),
        logger=get_logger(),
        reset_window=get_settings().password_reset_window,
    )


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer(token_codec=get_token_codec())


# ============================================================================
# Command Handler Factories
# ============================================================================


def get_register_user_handler(session: AsyncSession) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped)."""
    from passage.application.commands.handlers import RegisterUserHandler

    settings = get_settings()
    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        session_manager=get_session_manager(session),
        code_service=get_verification_code_service(session),
        token_issuer=get_token_issuer(),
        email_service=get_email_service(),
        logger=get_logger(),
        app_origin=settings.app_origin,
        app_name=settings.app_name,
        verification_ttl=settings.email_verification_ttl,
    )


def get_login_user_handler(session: AsyncSession) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from passage.application.commands.handlers import LoginUserHandler

    return LoginUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        session_manager=get_session_manager(session),
        token_issuer=get_token_issuer(),
        logger=get_logger(),
    )


def get_refresh_token_handler(session: AsyncSession) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from passage.application.commands.handlers import RefreshAccessTokenHandler

    return RefreshAccessTokenHandler(
        token_codec=get_token_codec(),
        session_manager=get_session_manager(session),
        token_issuer=get_token_issuer(),
        logger=get_logger(),
    )


def get_verify_email_handler(session: AsyncSession) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped)."""
    from passage.application.commands.handlers import VerifyEmailHandler

    return VerifyEmailHandler(
        user_repo=UserRepository(session=session),
        code_service=get_verification_code_service(session),
        logger=get_logger(),
    )


def get_request_password_reset_handler(
    session: AsyncSession,
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped)."""
    from passage.application.commands.handlers import RequestPasswordResetHandler

    settings = get_settings()
    return RequestPasswordResetHandler(
        user_repo=UserRepository(session=session),
        code_service=get_verification_code_service(session),
        email_service=get_email_service(),
        logger=get_logger(),
        app_origin=settings.app_origin,
        app_name=settings.app_name,
        reset_ttl=settings.password_reset_ttl,
    )


def get_reset_password_handler(session: AsyncSession) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped)."""
    from passage.application.commands.handlers import ResetPasswordHandler

    return ResetPasswordHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        code_service=get_verification_code_service(session),
        session_manager=get_session_manager(session),
        logger=get_logger(),
    )


def get_logout_user_handler(session: AsyncSession) -> "LogoutUserHandler":
    """Get LogoutUser command handler (request-scoped)."""
    from passage.application.commands.handlers import LogoutUserHandler

    return LogoutUserHandler(
        token_codec=get_token_codec(),
        session_manager=get_session_manager(session),
        logger=get_logger(),
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


def get_get_user_handler(session: AsyncSession) -> "GetUserHandler":
    """Get GetUser query handler (request-scoped)."""
    from passage.application.queries.handlers import GetUserHandler

    return GetUserHandler(user_repo=UserRepository(session=session))


def get_authenticate_access_token_handler() -> "AuthenticateAccessTokenHandler":
    """Get AuthenticateAccessToken query handler (stateless)."""
    from passage.application.queries.handlers import AuthenticateAccessTokenHandler

    return AuthenticateAccessTokenHandler(token_codec=get_token_codec())
