"""Verification code service.

Generates, rate-limits and redeems single-use codes scoped to a purpose.

Flows with a dependent mutation redeem in three steps:
    claim() -> dependent mutation -> release() only if the mutation failed
``claim()`` deletes the row before the mutation, so of two concurrent
redeemers only the one whose delete removed it proceeds. ``release()`` puts
the record back so a failed flow can be retried with the same code.
"""

import secrets
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from passage.core.enums import ErrorCode
from passage.core.errors import NotFoundError, RateLimitError
from passage.core.result import Failure, Result, Success
from passage.domain.entities import VerificationCode
from passage.domain.enums import CodePurpose
from passage.domain.protocols import LoggerProtocol, VerificationCodeRepository

DEFAULT_RESET_WINDOW = timedelta(minutes=5)
CODE_BYTES = 32
LOG_PREFIX_LENGTH = 8


def code_prefix(code: str) -> str:
    """Truncated code for log output."""
    return code[:LOG_PREFIX_LENGTH] + "..."


class VerificationCodeService:
    """Issues and redeems verification codes.

    Business Rules:
        - Codes are 64 hex characters from a CSPRNG
        - At most one unexpired PASSWORD_RESET code per user may be created
          within the trailing reset window (best effort under races)
        - EMAIL_VERIFICATION codes are not rate limited
        - Unknown, wrong-purpose and expired codes are indistinguishable
    """

    def __init__(
        self,
        code_repo: VerificationCodeRepository,
        logger: LoggerProtocol,
        reset_window: timedelta = DEFAULT_RESET_WINDOW,
    ) -> None:
        """Initialize code service.

        Args:
            code_repo: Verification code persistence.
            logger: Structured logger.
            reset_window: Trailing window for the password reset rate limit.
        """
        self._code_repo = code_repo
        self._logger = logger
        self._reset_window = reset_window

    async def rate_limit_check(
        self,
        user_id: UUID,
        purpose: CodePurpose = CodePurpose.PASSWORD_RESET,
    ) -> Result[None, RateLimitError]:
        """Reject a new code while a recent unexpired one exists.

        Only PASSWORD_RESET is limited; any other purpose passes.

        Returns:
            Success(None) or Failure(RateLimitError).
        """
        if purpose is not CodePurpose.PASSWORD_RESET:
            return Success(value=None)

        now = datetime.now(UTC)
        count = await self._code_repo.count_recent(
            user_id=user_id,
            purpose=purpose,
            since=now - self._reset_window,
            now=now,
        )
        if count >= 1:
            self._logger.warning(
                "password_reset_rate_limited",
                user_id=str(user_id),
                recent_codes=count,
            )
            return Failure(
                error=RateLimitError(
                    code=ErrorCode.PASSWORD_RESET_RATE_LIMITED,
                    message="Too many requests, please try again later",
                    retry_after_seconds=int(self._reset_window.total_seconds()),
                )
            )
        return Success(value=None)

    async def issue(
        self,
        user_id: UUID,
        purpose: CodePurpose,
        ttl: timedelta,
    ) -> Result[VerificationCode, RateLimitError]:
        """Create and persist a new code.

        Args:
            user_id: Owner of the code.
            purpose: Flow the code is redeemable for.
            ttl: Lifetime from now.

        Returns:
            Success(code record) or Failure(RateLimitError).
        """
        match await self.rate_limit_check(user_id, purpose):
            case Failure(error=error):
                return Failure(error=error)

        now = datetime.now(UTC)
        record = VerificationCode(
            id=uuid7(),
            code=secrets.token_hex(CODE_BYTES),
            user_id=user_id,
            purpose=purpose,
            created_at=now,
            expires_at=now + ttl,
        )
        await self._code_repo.save(record)
        self._logger.info(
            "verification_code_issued",
            user_id=str(user_id),
            purpose=purpose.value,
            code=code_prefix(record.code),
            expires_at=record.expires_at.isoformat(),
        )
        return Success(value=record)

    async def validate(
        self, code: str, purpose: CodePurpose
    ) -> Result[VerificationCode, NotFoundError]:
        """Look up a redeemable code without spending it."""
        record = await self._code_repo.find_valid(code, purpose, datetime.now(UTC))
        if record is None:
            self._logger.info(
                "verification_code_rejected",
                purpose=purpose.value,
                code=code_prefix(code),
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.VERIFICATION_CODE_NOT_FOUND,
                    message="Invalid or expired verification code",
                    resource_type="VerificationCode",
                    resource_id=code_prefix(code),
                )
            )
        return Success(value=record)

    async def spend(self, record: VerificationCode) -> bool:
        """Delete a validated code.

        Returns:
            True if this call removed it; False if it was already spent.
        """
        deleted = await self._code_repo.delete(record.id)
        if not deleted:
            self._logger.warning(
                "verification_code_already_spent",
                purpose=record.purpose.value,
                code=code_prefix(record.code),
            )
        return deleted

    async def claim(
        self, code: str, purpose: CodePurpose
    ) -> Result[VerificationCode, NotFoundError]:
        """Validate and spend a code, returning the removed record.

        Returns:
            Success(record) for the one caller whose delete removed the row.
            Failure(NotFoundError) otherwise, including a lost race.
        """
        match await self.validate(code, purpose):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                pass

        if not await self.spend(record):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.VERIFICATION_CODE_NOT_FOUND,
                    message="Invalid or expired verification code",
                    resource_type="VerificationCode",
                    resource_id=code_prefix(code),
                )
            )
        return Success(value=record)

    async def release(self, record: VerificationCode) -> None:
        """Restore a claimed code after the flow that claimed it failed."""
        await self._code_repo.save(record)
        self._logger.info(
            "verification_code_released",
            purpose=record.purpose.value,
            code=code_prefix(record.code),
        )

    async def consume(
        self, code: str, purpose: CodePurpose
    ) -> Result[UUID, NotFoundError]:
        """Claim a code for good and return its owner's id."""
        match await self.claim(code, purpose):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                return Success(value=record.user_id)
