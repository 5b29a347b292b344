"""In-memory repository fakes and a fully wired handler set.

The fakes implement the repository protocols structurally and hand out
copies of stored entities, so handlers cannot mutate state without going
through the repository, just like with a real database.

``AuthSystem`` wires every handler against the fakes, a real bcrypt
service (cost 10), a real JWT codec and the stub email service. Flow tests
drive it with freezegun to move the clock.
"""

from dataclasses import replace
from datetime import UTC, datetime, timedelta
from unittest.mock import Mock
from uuid import UUID

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
from passage.application.services import (
    SessionManager,
    TokenIssuer,
    VerificationCodeService,
)
from passage.core.enums import ErrorCode
from passage.core.errors import ConflictError
from passage.core.result import Failure, Result, Success
from passage.domain.entities import Session, User, VerificationCode
from passage.domain.enums import CodePurpose
from passage.infrastructure.email import StubEmailService
from passage.infrastructure.security import BcryptPasswordService, JWTTokenCodec

ACCESS_SECRET = "a" * 32 + "-access-secret"
REFRESH_SECRET = "r" * 32 + "-refresh-secret"
APP_ORIGIN = "https://app.example.com"


class InMemoryUserRepository:
    """UserRepository fake keyed by user id."""

    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}

    async def find_by_id(self, user_id: UUID) -> User | None:
        user = self.users.get(user_id)
        return replace(user) if user else None

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        for user in self.users.values():
            if user.username == identifier or user.email == identifier.lower():
                return replace(user)
        return None

    async def find_by_email(self, email: str) -> User | None:
        for user in self.users.values():
            if user.email == email.lower():
                return replace(user)
        return None

    async def exists_by_username(self, username: str) -> bool:
        return any(u.username == username for u in self.users.values())

    async def exists_by_email(self, email: str) -> bool:
        return any(u.email == email.lower() for u in self.users.values())

    async def save(self, user: User) -> Result[User, ConflictError]:
        if await self.exists_by_username(user.username):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message="Username already in use",
                    resource_type="User",
                    conflicting_field="username",
                )
            )
        if await self.exists_by_email(user.email):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email already in use",
                    resource_type="User",
                    conflicting_field="email",
                )
            )
        self.users[user.id] = replace(user)
        return Success(value=replace(user))

    async def mark_verified(self, user_id: UUID) -> User | None:
        user = self.users.get(user_id)
        if user is None:
            return None
        user.is_verified = True
        user.updated_at = datetime.now(UTC)
        return replace(user)

    async def update_password(self, user_id: UUID, password_hash: str) -> User | None:
        user = self.users.get(user_id)
        if user is None:
            return None
        user.password_hash = password_hash
        user.updated_at = datetime.now(UTC)
        return replace(user)


class InMemorySessionRepository:
    """SessionRepository fake keyed by session id."""

    def __init__(self) -> None:
        self.sessions: dict[UUID, Session] = {}

    async def save(self, session: Session) -> None:
        self.sessions[session.id] = replace(session)

    async def find_by_id(self, session_id: UUID) -> Session | None:
        session = self.sessions.get(session_id)
        return replace(session) if session else None

    async def update_expiry(self, session_id: UUID, expires_at: datetime) -> bool:
        session = self.sessions.get(session_id)
        if session is None:
            return False
        session.expires_at = expires_at
        return True

    async def delete(self, session_id: UUID) -> bool:
        return self.sessions.pop(session_id, None) is not None

    async def delete_all_for_user(self, user_id: UUID) -> int:
        doomed = [s.id for s in self.sessions.values() if s.user_id == user_id]
        for session_id in doomed:
            del self.sessions[session_id]
        return len(doomed)


class InMemoryVerificationCodeRepository:
    """VerificationCodeRepository fake keyed by record id."""

    def __init__(self) -> None:
        self.codes: dict[UUID, VerificationCode] = {}

    async def save(self, code: VerificationCode) -> None:
        self.codes[code.id] = replace(code)

    async def find_valid(
        self, code: str, purpose: CodePurpose, now: datetime
    ) -> VerificationCode | None:
        for record in self.codes.values():
            if record.code == code and record.is_redeemable_for(purpose, now):
                return replace(record)
        return None

    async def delete(self, code_id: UUID) -> bool:
        return self.codes.pop(code_id, None) is not None

    async def count_recent(
        self,
        user_id: UUID,
        purpose: CodePurpose,
        since: datetime,
        now: datetime,
    ) -> int:
        return sum(
            1
            for record in self.codes.values()
            if record.user_id == user_id
            and record.purpose == purpose
            and record.created_at >= since
            and record.expires_at > now
        )

    def for_user(self, user_id: UUID, purpose: CodePurpose) -> list[VerificationCode]:
        """Records of one user and purpose, oldest first."""
        return sorted(
            (
                r
                for r in self.codes.values()
                if r.user_id == user_id and r.purpose == purpose
            ),
            key=lambda r: r.created_at,
        )


class AuthSystem:
    """Every handler wired against in-memory stores.

    Attributes are public so tests can inspect stored state directly.
    """

    def __init__(
        self,
        *,
        session_lifetime: timedelta = timedelta(days=30),
        renewal_threshold: timedelta = timedelta(days=1),
        reset_window: timedelta = timedelta(minutes=5),
        reset_ttl: timedelta = timedelta(hours=1),
        verification_ttl: timedelta = timedelta(days=365),
    ) -> None:
        self.logger = Mock()
        self.user_repo = InMemoryUserRepository()
        self.session_repo = InMemorySessionRepository()
        self.code_repo = InMemoryVerificationCodeRepository()
        self.password_service = BcryptPasswordService(cost_factor=10)
        self.token_codec = JWTTokenCodec(
            access_secret=ACCESS_SECRET,
            refresh_secret=REFRESH_SECRET,
        )
        self.email_service = StubEmailService(logger=self.logger)

        self.session_manager = SessionManager(
            session_repo=self.session_repo,
            logger=self.logger,
            lifetime=session_lifetime,
            renewal_threshold=renewal_threshold,
        )
        self.code_service = VerificationCodeService(
            code_repo=self.code_repo,
            logger=self.logger,
            reset_window=reset_window,
        )
        self.token_issuer = TokenIssuer(token_codec=self.token_codec)

        self.register = RegisterUserHandler(
            user_repo=self.user_repo,
            password_service=self.password_service,
            session_manager=self.session_manager,
            code_service=self.code_service,
            token_issuer=self.token_issuer,
            email_service=self.email_service,
            logger=self.logger,
            app_origin=APP_ORIGIN,
            verification_ttl=verification_ttl,
        )
        self.login = LoginUserHandler(
            user_repo=self.user_repo,
            password_service=self.password_service,
            session_manager=self.session_manager,
            token_issuer=self.token_issuer,
            logger=self.logger,
        )
        self.refresh = RefreshAccessTokenHandler(
            token_codec=self.token_codec,
            session_manager=self.session_manager,
            token_issuer=self.token_issuer,
            logger=self.logger,
        )
        self.verify_email = VerifyEmailHandler(
            user_repo=self.user_repo,
            code_service=self.code_service,
            logger=self.logger,
        )
        self.request_password_reset = RequestPasswordResetHandler(
            user_repo=self.user_repo,
            code_service=self.code_service,
            email_service=self.email_service,
            logger=self.logger,
            app_origin=APP_ORIGIN,
            reset_ttl=reset_ttl,
        )
        self.reset_password = ResetPasswordHandler(
            user_repo=self.user_repo,
            password_service=self.password_service,
            code_service=self.code_service,
            session_manager=self.session_manager,
            logger=self.logger,
        )
        self.logout = LogoutUserHandler(
            token_codec=self.token_codec,
            session_manager=self.session_manager,
            logger=self.logger,
        )
        self.get_user = GetUserHandler(user_repo=self.user_repo)
        self.authenticate = AuthenticateAccessTokenHandler(token_codec=self.token_codec)
