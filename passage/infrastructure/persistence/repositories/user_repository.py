"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Maps between domain User entities and UserModel rows.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from passage.core.enums import ErrorCode
from passage.core.errors import ConflictError
from passage.core.result import Failure, Result, Success
from passage.domain.entities import User
from passage.infrastructure.persistence.models import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Does NOT inherit from the protocol (structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_username_or_email("alice")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        """Exact username match, or email match after lowercasing."""
        stmt = select(UserModel).where(
            or_(
                UserModel.username == identifier,
                UserModel.email == identifier.lower(),
            )
        )
        result = await self.session.execute(stmt)
        user_model = result.scalars().first()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> Result[User, ConflictError]:
        """Insert a new user.

        Returns:
            Success(user) or Failure(ConflictError) when a unique index
            rejects the row (a concurrent signup won the race).
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            if await self.exists_by_username(user.username):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.USERNAME_ALREADY_EXISTS,
                        message="Username already in use",
                        resource_type="User",
                        conflicting_field="username",
                    )
                )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email already in use",
                    resource_type="User",
                    conflicting_field="email",
                )
            )
        await self.session.refresh(user_model)
        return Success(value=self._to_domain(user_model))

    async def mark_verified(self, user_id: UUID) -> User | None:
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        user_model.is_verified = True
        user_model.updated_at = datetime.now(UTC)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(user_model)
        return self._to_domain(user_model)

    async def update_password(self, user_id: UUID, password_hash: str) -> User | None:
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        user_model.password_hash = password_hash
        user_model.updated_at = datetime.now(UTC)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(user_model)
        return self._to_domain(user_model)

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            name=user_model.name,
            username=user_model.username,
            email=user_model.email,
            password_hash=user_model.password_hash,
            is_verified=user_model.is_verified,
            avatar=user_model.avatar,
            banner=user_model.banner,
            bio=user_model.bio,
            location=user_model.location,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            is_verified=user.is_verified,
            avatar=user.avatar,
            banner=user.banner,
            bio=user.bio,
            location=user.location,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
