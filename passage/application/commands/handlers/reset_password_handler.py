"""Reset Password handler.

Flow:
1. Claim the PASSWORD_RESET code (only one concurrent redeemer wins)
2. Hash the new password and update the user
3. Delete every session of the user (all outstanding refresh tokens die)
4. Return Success(PublicUser)

If step 2 or 3 fails the code is released, so retrying the same link
completes the reset. An invalid or expired code leaves the password and
sessions untouched.
"""

from uuid import UUID

from passage.application.commands.auth_commands import ResetPassword
from passage.application.dtos import PublicUser
from passage.application.services import SessionManager, VerificationCodeService
from passage.core.enums import ErrorCode
from passage.core.errors import DomainError, InternalError
from passage.core.result import Failure, Result, Success
from passage.domain.entities import User
from passage.domain.enums import CodePurpose
from passage.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class ResetPasswordHandler:
    """Handler for reset password command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        code_service: VerificationCodeService,
        session_manager: SessionManager,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize reset password handler with dependencies.

        Args:
            user_repo: User repository for the password update.
            password_service: Hashes the new password.
            code_service: Claims and, on failure, releases the reset code.
            session_manager: Deletes the user's sessions.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._code_service = code_service
        self._session_manager = session_manager
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[PublicUser, DomainError]:
        """Handle reset password command.

        Returns:
            Success(PublicUser).
            Failure(NotFoundError) for an unknown, wrong-purpose or expired code.
            Failure(InternalError) if the password update or the session
            cleanup fails.
        """
        try:
            match await self._code_service.claim(
                cmd.code, CodePurpose.PASSWORD_RESET
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=record):
                    pass

            try:
                user = await self._reset(record.user_id, cmd.password)
            except Exception:
                await self._code_service.release(record)
                raise

            if user is None:
                await self._code_service.release(record)
                self._logger.error(
                    "password_update_failed",
                    user_id=str(record.user_id),
                )
                return Failure(
                    error=InternalError(
                        code=ErrorCode.USER_UPDATE_FAILED,
                        message="Failed to reset password",
                        operation="update_password",
                    )
                )

            self._logger.info("password_reset", user_id=str(user.id))
            return Success(value=PublicUser.from_entity(user))

        except Exception as e:
            self._logger.error("password_reset_failed", error=e)
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Failed to reset password",
                    operation="reset_password",
                )
            )

    async def _reset(self, user_id: UUID, password: str) -> User | None:
        password_hash = self._password_service.hash_password(password)
        user = await self._user_repo.update_password(user_id, password_hash)
        if user is None:
            return None
        await self._session_manager.delete_all_for_user(user.id)
        return user
