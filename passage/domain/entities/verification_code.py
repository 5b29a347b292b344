"""VerificationCode domain entity for single-use codes.

Pure business logic, no framework dependencies.

Codes back two flows: email verification (issued once at signup, long-lived)
and password reset (short-lived, rate-limited). The ``code`` value is the
unguessable identifier embedded in emailed links; ``id`` is the record key.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from passage.domain.enums import CodePurpose


@dataclass(slots=True, kw_only=True)
class VerificationCode:
    """Single-use, purpose-scoped, time-bounded code.

    Business Rules:
        - A code is redeemable only for its own purpose
        - A code is redeemable only while expires_at is in the future
        - A redeemed code is deleted and can never be redeemed again

    Attributes:
        id: Record identifier.
        code: Random hex string carried in links (unique).
        user_id: User the code was issued to.
        purpose: EMAIL_VERIFICATION or PASSWORD_RESET.
        created_at: When the code was issued.
        expires_at: When the code stops being redeemable.
    """

    id: UUID
    code: str
    user_id: UUID
    purpose: CodePurpose
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once expires_at is not in the future."""
        now = now or datetime.now(UTC)
        return self.expires_at <= now

    def is_redeemable_for(
        self, purpose: CodePurpose, now: datetime | None = None
    ) -> bool:
        """Check purpose match and expiry in one step.

        Args:
            purpose: Purpose required by the calling flow.
            now: Reference time (defaults to current UTC time).

        Returns:
            True if the code matches the purpose and has not expired.
        """
        return self.purpose == purpose and not self.is_expired(now)
