"""Login User handler.

Flow:
1. Find user by username or email
2. Verify password
3. Create session
4. Mint access + refresh tokens
5. Return Success(AuthResult)

An unknown identifier and a wrong password produce the same failure so
callers cannot enumerate accounts. An unknown identifier is still checked
against a throwaway hash so both failures cost one bcrypt comparison.
"""

import secrets
from functools import lru_cache

from passage.application.commands.auth_commands import LoginUser
from passage.application.dtos import AuthResult, PublicUser
from passage.application.services import SessionManager, TokenIssuer
from passage.core.enums import ErrorCode
from passage.core.errors import AuthenticationError, DomainError, InternalError
from passage.core.result import Failure, Result, Success
from passage.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


@lru_cache(maxsize=8)
def dummy_password_hash(password_service: PasswordHashingProtocol) -> str:
    """Hash of a random password, computed once per hashing service."""
    return password_service.hash_password(secrets.token_urlsafe(16))


class LoginUserHandler:
    """Handler for login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        session_manager: SessionManager,
        token_issuer: TokenIssuer,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._session_manager = session_manager
        self._token_issuer = token_issuer
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthResult, DomainError]:
        """Handle login command.

        Returns:
            Success(AuthResult) with a new session's token pair.
            Failure(AuthenticationError) on bad credentials.
            Failure(InternalError) on a store failure.
        """
        try:
            user = await self._user_repo.find_by_username_or_email(
                cmd.username_or_email
            )
            if user is None:
                self._password_service.verify_password(
                    cmd.password, dummy_password_hash(self._password_service)
                )
            if user is None or not self._password_service.verify_password(
                cmd.password, user.password_hash
            ):
                self._logger.info("login_failed", reason="invalid_credentials")
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.INVALID_CREDENTIALS,
                        message="Invalid username or password",
                    )
                )

            session = await self._session_manager.create(user.id, cmd.user_agent)
            access_token, refresh_token = self._token_issuer.pair(session)

            self._logger.info(
                "user_logged_in",
                user_id=str(user.id),
                session_id=str(session.id),
            )
            return Success(
                value=AuthResult(
                    user=PublicUser.from_entity(user),
                    access_token=access_token,
                    refresh_token=refresh_token,
                )
            )

        except Exception as e:
            self._logger.error("login_failed", error=e)
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Login failed",
                    operation="login",
                )
            )
