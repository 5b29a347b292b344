"""VerificationCodeRepository - SQLAlchemy implementation."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from passage.domain.entities import VerificationCode
from passage.domain.enums import CodePurpose
from passage.infrastructure.persistence.models import VerificationCodeModel


class VerificationCodeRepository:
    """SQLAlchemy implementation of VerificationCodeRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, code: VerificationCode) -> None:
        self.session.add(
            VerificationCodeModel(
                id=code.id,
                code=code.code,
                user_id=code.user_id,
                purpose=code.purpose.value,
                created_at=code.created_at,
                expires_at=code.expires_at,
            )
        )
        await self.session.commit()

    async def find_valid(
        self, code: str, purpose: CodePurpose, now: datetime
    ) -> VerificationCode | None:
        stmt = select(VerificationCodeModel).where(
            VerificationCodeModel.code == code,
            VerificationCodeModel.purpose == purpose.value,
            VerificationCodeModel.expires_at > now,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_domain(model)

    async def delete(self, code_id: UUID) -> bool:
        stmt = delete(VerificationCodeModel).where(VerificationCodeModel.id == code_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def count_recent(
        self,
        user_id: UUID,
        purpose: CodePurpose,
        since: datetime,
        now: datetime,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(VerificationCodeModel)
            .where(
                VerificationCodeModel.user_id == user_id,
                VerificationCodeModel.purpose == purpose.value,
                VerificationCodeModel.created_at >= since,
                VerificationCodeModel.expires_at > now,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    def _to_domain(self, model: VerificationCodeModel) -> VerificationCode:
        return VerificationCode(
            id=model.id,
            code=model.code,
            user_id=model.user_id,
            purpose=CodePurpose(model.purpose),
            created_at=model.created_at,
            expires_at=model.expires_at,
        )
