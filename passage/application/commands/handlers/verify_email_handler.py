"""Verify Email handler.

Flow:
1. Claim the EMAIL_VERIFICATION code (only one concurrent redeemer wins)
2. Mark the owning user verified
3. Return Success(PublicUser)

A failed update releases the code, so it stays redeemable.
"""

from passage.application.commands.auth_commands import VerifyEmail
from passage.application.dtos import PublicUser
from passage.application.services import VerificationCodeService
from passage.core.enums import ErrorCode
from passage.core.errors import DomainError, InternalError
from passage.core.result import Failure, Result, Success
from passage.domain.enums import CodePurpose
from passage.domain.protocols import LoggerProtocol, UserRepository


class VerifyEmailHandler:
    """Handler for email verification command."""

    def __init__(
        self,
        user_repo: UserRepository,
        code_service: VerificationCodeService,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._code_service = code_service
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[PublicUser, DomainError]:
        """Handle email verification command.

        Returns:
            Success(PublicUser) with is_verified set.
            Failure(NotFoundError) for an unknown, wrong-purpose or expired code.
            Failure(InternalError) if the user update fails.
        """
        try:
            match await self._code_service.claim(
                cmd.code, CodePurpose.EMAIL_VERIFICATION
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=record):
                    pass

            try:
                user = await self._user_repo.mark_verified(record.user_id)
            except Exception:
                await self._code_service.release(record)
                raise

            if user is None:
                await self._code_service.release(record)
                self._logger.error(
                    "email_verification_update_failed",
                    user_id=str(record.user_id),
                )
                return Failure(
                    error=InternalError(
                        code=ErrorCode.USER_UPDATE_FAILED,
                        message="Failed to verify email",
                        operation="mark_verified",
                    )
                )

            self._logger.info("email_verified", user_id=str(user.id))
            return Success(value=PublicUser.from_entity(user))

        except Exception as e:
            self._logger.error("email_verification_failed", error=e)
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Failed to verify email",
                    operation="verify_email",
                )
            )
