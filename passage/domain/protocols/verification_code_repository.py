"""VerificationCodeRepository protocol (port) for domain layer.

Code Lifecycle:
    1. Created by signup (email verification) or forgot-password (reset)
    2. Looked up by code string, purpose and expiry when redeemed
    3. Deleted after the dependent mutation succeeds (single use)
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from passage.domain.entities.verification_code import VerificationCode
from passage.domain.enums import CodePurpose


class VerificationCodeRepository(Protocol):
    """Protocol for verification code persistence operations."""

    async def save(self, code: VerificationCode) -> None:
        """Persist a new code."""
        ...

    async def find_valid(
        self, code: str, purpose: CodePurpose, now: datetime
    ) -> VerificationCode | None:
        """Find a redeemable code.

        Args:
            code: Code string carried in the link.
            purpose: Required purpose.
            now: Reference time; only codes expiring after it match.

        Returns:
            VerificationCode if found, None for unknown, wrong-purpose or
            expired codes.
        """
        ...

    async def delete(self, code_id: UUID) -> bool:
        """Delete a code.

        Returns:
            True if a row was removed. False means another request already
            spent it.
        """
        ...

    async def count_recent(
        self,
        user_id: UUID,
        purpose: CodePurpose,
        since: datetime,
        now: datetime,
    ) -> int:
        """Count unexpired codes of purpose created at or after since."""
        ...
