"""Request Password Reset handler (forgot password).

Flow:
1. Look up user by email
2. Rate limit check (one reset code per trailing window)
3. Issue PASSWORD_RESET code
4. Build reset link carrying the code and its expiry (epoch milliseconds)
5. Send password reset email
6. Return Success(PasswordResetLink)

Unlike signup, delivery is the point of this flow: a notifier failure
fails the request.
"""

from datetime import timedelta

from passage.application.commands.auth_commands import RequestPasswordReset
from passage.application.dtos import PasswordResetLink
from passage.application.services import VerificationCodeService, code_prefix
from passage.application.services.email_templates import password_reset_message
from passage.core.enums import ErrorCode
from passage.core.errors import AuthenticationError, DomainError, InternalError
from passage.core.result import Failure, Result, Success
from passage.domain.enums import CodePurpose
from passage.domain.protocols import EmailProtocol, LoggerProtocol, UserRepository


class RequestPasswordResetHandler:
    """Handler for request password reset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        code_service: VerificationCodeService,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        app_origin: str,
        app_name: str = "Passage",
        reset_ttl: timedelta = timedelta(hours=1),
    ) -> None:
        """Initialize password reset request handler with dependencies.

        Args:
            user_repo: User repository for lookup by email.
            code_service: Issues and rate-limits reset codes.
            email_service: Sends the reset email.
            logger: Structured logger.
            app_origin: Web client origin for the reset link.
            app_name: Product name used in the email copy.
            reset_ttl: Lifetime of the reset code.
        """
        self._user_repo = user_repo
        self._code_service = code_service
        self._email_service = email_service
        self._logger = logger
        self._app_origin = app_origin
        self._app_name = app_name
        self._reset_ttl = reset_ttl

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetLink, DomainError]:
        """Handle password reset request command.

        Returns:
            Success(PasswordResetLink) with the link and notifier message id.
            Failure(AuthenticationError) if no user has this email.
            Failure(RateLimitError) if a reset code was issued recently.
            Failure(InternalError) if the email could not be sent.
        """
        try:
            user = await self._user_repo.find_by_email(cmd.email)
            if user is None:
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message="User not found",
                    )
                )

            match await self._code_service.issue(
                user.id, CodePurpose.PASSWORD_RESET, self._reset_ttl
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=record):
                    pass

            expires_ms = int(record.expires_at.timestamp() * 1000)
            url = (
                f"{self._app_origin}/password/reset"
                f"?code={record.code}&exp={expires_ms}"
            )
            message = password_reset_message(
                to=user.email,
                url=url,
                app_name=self._app_name,
                ttl_minutes=int(self._reset_ttl.total_seconds() // 60),
            )

            match await self._email_service.send_email(message):
                case Failure(error=reason):
                    self._logger.error(
                        "password_reset_email_failed",
                        user_id=str(user.id),
                        reason=reason,
                    )
                    return Failure(
                        error=InternalError(
                            code=ErrorCode.EMAIL_DELIVERY_FAILED,
                            message="Failed to send password reset email",
                            operation="send_email",
                        )
                    )
                case Success(value=email_id):
                    pass

            self._logger.info(
                "password_reset_requested",
                user_id=str(user.id),
                code=code_prefix(record.code),
                email_id=email_id,
            )
            return Success(value=PasswordResetLink(url=url, email_id=email_id))

        except Exception as e:
            self._logger.error("password_reset_request_failed", error=e)
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Password reset request failed",
                    operation="forgot_password",
                )
            )
