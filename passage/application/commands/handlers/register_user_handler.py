"""Register User handler (signup).

Flow:
1. Check username uniqueness
2. Check email uniqueness
3. Hash password
4. Save user (store unique indexes are the final guard against races)
5. Issue email verification code
6. Send verification email (best effort, failure only logged)
7. Create session
8. Mint access + refresh tokens
9. Return Success(AuthResult)

Architecture:
- Application layer ONLY imports from domain and core
- Repositories and services are injected via protocols
"""

from datetime import UTC, datetime, timedelta

from uuid_extensions import uuid7

from passage.application.commands.auth_commands import RegisterUser
from passage.application.dtos import AuthResult, PublicUser
from passage.application.services import (
    SessionManager,
    TokenIssuer,
    VerificationCodeService,
)
from passage.application.services.email_templates import verify_email_message
from passage.core.enums import ErrorCode
from passage.core.errors import ConflictError, DomainError, InternalError
from passage.core.result import Failure, Result, Success
from passage.domain.entities import User, VerificationCode
from passage.domain.enums import CodePurpose
from passage.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegisterUserHandler:
    """Handler for user registration command.

    A new user starts unverified with one open session.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        session_manager: SessionManager,
        code_service: VerificationCodeService,
        token_issuer: TokenIssuer,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        app_origin: str,
        app_name: str = "Passage",
        verification_ttl: timedelta = timedelta(days=365),
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            session_manager: Opens the first session.
            code_service: Issues the email verification code.
            token_issuer: Mints the token pair.
            email_service: Sends the verification email.
            logger: Structured logger.
            app_origin: Web client origin for the verification link.
            app_name: Product name used in the email copy.
            verification_ttl: Lifetime of the verification code.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._session_manager = session_manager
        self._code_service = code_service
        self._token_issuer = token_issuer
        self._email_service = email_service
        self._logger = logger
        self._app_origin = app_origin
        self._app_name = app_name
        self._verification_ttl = verification_ttl

    async def handle(self, cmd: RegisterUser) -> Result[AuthResult, DomainError]:
        """Handle user registration command.

        Returns:
            Success(AuthResult) with the unverified user and a token pair.
            Failure(ConflictError) if username or email is taken.
            Failure(InternalError) on a store failure.
        """
        try:
            # Step 1-2: Uniqueness
            if await self._user_repo.exists_by_username(cmd.username):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.USERNAME_ALREADY_EXISTS,
                        message="Username already in use",
                        resource_type="User",
                        conflicting_field="username",
                    )
                )
            if await self._user_repo.exists_by_email(cmd.email):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.EMAIL_ALREADY_EXISTS,
                        message="Email already in use",
                        resource_type="User",
                        conflicting_field="email",
                    )
                )

            # Step 3-4: Create user
            now = datetime.now(UTC)
            user = User(
                id=uuid7(),
                name=cmd.name,
                username=cmd.username,
                email=cmd.email,
                password_hash=self._password_service.hash_password(cmd.password),
                is_verified=False,
                created_at=now,
                updated_at=now,
            )
            match await self._user_repo.save(user):
                case Failure(error=conflict):
                    return Failure(error=conflict)
                case Success(value=user):
                    pass

            # Step 5-6: Verification code + email
            match await self._code_service.issue(
                user.id, CodePurpose.EMAIL_VERIFICATION, self._verification_ttl
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=record):
                    await self._send_verification_email(user, record)

            # Step 7-8: Session + tokens
            session = await self._session_manager.create(user.id, cmd.user_agent)
            access_token, refresh_token = self._token_issuer.pair(session)

            self._logger.info(
                "user_registered",
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
            self._logger.error(
                "user_registration_failed",
                error=e,
                username=cmd.username,
            )
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Registration failed",
                    operation="signup",
                )
            )

    async def _send_verification_email(
        self, user: User, record: VerificationCode
    ) -> None:
        """Send the verification link. Delivery failure never fails signup."""
        url = f"{self._app_origin}/email/verify/{record.code}"
        message = verify_email_message(to=user.email, url=url, app_name=self._app_name)
        try:
            result = await self._email_service.send_email(message)
        except Exception as e:
            self._logger.warning(
                "verification_email_failed",
                user_id=str(user.id),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return

        match result:
            case Success(value=email_id):
                self._logger.info(
                    "verification_email_sent",
                    user_id=str(user.id),
                    email_id=email_id,
                )
            case Failure(error=reason):
                self._logger.warning(
                    "verification_email_failed",
                    user_id=str(user.id),
                    reason=reason,
                )
