"""Infrastructure dependency factories.

Application-scoped singletons:
- Database (SQLAlchemy async engine)
- Password hashing (bcrypt)
- Token codec (JWT)
- Email (stub/Resend)
- Logging (structlog console)

Each factory is wrapped in ``lru_cache``; tests reset them with
``get_settings.cache_clear()`` and ``<factory>.cache_clear()``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from passage.core.config import get_settings
from passage.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from passage.domain.protocols import (
        EmailProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        TokenCodecProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from passage.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=not settings.is_development, level=level)


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped)."""
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Open a request-scoped session from the shared database.

    Usage:
        async with get_db_session() as session:
            handler = get_login_user_handler(session)
            result = await handler.handle(cmd)
    """
    async with get_database().get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton with the configured cost."""
    from passage.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_codec() -> "TokenCodecProtocol":
    """Get JWT token codec singleton (separate access and refresh secrets)."""
    from passage.infrastructure.security import JWTTokenCodec

    settings = get_settings()
    return JWTTokenCodec(
        access_secret=settings.access_token_secret,
        refresh_secret=settings.refresh_token_secret,
        access_expiration_minutes=settings.access_token_expire_minutes,
        refresh_expiration_days=settings.refresh_token_expire_days,
    )


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton.

    - email_api_key configured: ResendEmailService
    - otherwise: StubEmailService (logs to console)
    """
    from passage.infrastructure.email import ResendEmailService, StubEmailService

    settings = get_settings()
    if settings.email_api_key:
        return ResendEmailService(
            base_url=settings.email_api_url,
            api_key=settings.email_api_key,
            sender=settings.email_sender,
            logger=get_logger(),
        )
    return StubEmailService(logger=get_logger())
