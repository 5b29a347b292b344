"""SessionRepository - SQLAlchemy implementation of SessionRepository protocol."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from passage.domain.entities import Session
from passage.infrastructure.persistence.models import SessionModel


class SessionRepository:
    """SQLAlchemy implementation of SessionRepository protocol.

    Writes are single statements so the row counts reported back reflect
    what this call changed, not what an earlier read saw.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, session: Session) -> None:
        self.session.add(self._to_model(session))
        await self.session.commit()

    async def find_by_id(self, session_id: UUID) -> Session | None:
        model = await self.session.get(SessionModel, session_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def update_expiry(self, session_id: UUID, expires_at: datetime) -> bool:
        stmt = (
            update(SessionModel)
            .where(SessionModel.id == session_id)
            .values(expires_at=expires_at)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def delete(self, session_id: UUID) -> bool:
        stmt = delete(SessionModel).where(SessionModel.id == session_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def delete_all_for_user(self, user_id: UUID) -> int:
        stmt = delete(SessionModel).where(SessionModel.user_id == user_id)
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        return result.rowcount

    def _to_domain(self, model: SessionModel) -> Session:
        return Session(
            id=model.id,
            user_id=model.user_id,
            user_agent=model.user_agent,
            created_at=model.created_at,
            expires_at=model.expires_at,
        )

    def _to_model(self, session: Session) -> SessionModel:
        return SessionModel(
            id=session.id,
            user_id=session.user_id,
            user_agent=session.user_agent,
            created_at=session.created_at,
            expires_at=session.expires_at,
        )
