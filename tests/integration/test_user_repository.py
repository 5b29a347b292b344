"""Integration tests for UserRepository.

Tests cover:
- Save and retrieve user
- Lookup by username-or-email and by email (case-insensitive email)
- Existence checks
- Unique constraints reported as ConflictError
- mark_verified and update_password

Architecture:
- Integration tests with REAL PostgreSQL database
- Uses test_database fixture (fresh schema per test)
- Separate sessions for write and read to prove persistence
"""

import pytest
from uuid_extensions import uuid7

from passage.core.enums import ErrorCode
from passage.core.result import Failure, Success
from passage.infrastructure.persistence.repositories import UserRepository
from tests.conftest import create_test_user


@pytest.mark.integration
class TestUserRepositorySave:
    @pytest.mark.asyncio
    async def test_save_user_persists_to_database(self, test_database):
        # Arrange
        user = create_test_user()

        # Act
        async with test_database.get_session() as session:
            result = await UserRepository(session=session).save(user)

        # Assert
        assert isinstance(result, Success)
        async with test_database.get_session() as session:
            found = await UserRepository(session=session).find_by_id(user.id)
        assert found is not None
        assert found.username == "alice"
        assert found.password_hash == user.password_hash
        assert found.is_verified is False

    @pytest.mark.asyncio
    async def test_duplicate_username_is_conflict(self, test_database):
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(create_test_user())

        async with test_database.get_session() as session:
            result = await UserRepository(session=session).save(
                create_test_user(email="other@x.com")
            )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USERNAME_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_duplicate_email_is_conflict(self, test_database):
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(create_test_user())

        async with test_database.get_session() as session:
            result = await UserRepository(session=session).save(
                create_test_user(username="alice2")
            )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS


@pytest.mark.integration
class TestUserRepositoryLookup:
    @pytest.mark.asyncio
    async def test_find_by_username_or_email(self, test_database):
        user = create_test_user()
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(user)

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            by_username = await repo.find_by_username_or_email("alice")
            by_email = await repo.find_by_username_or_email("A@X.com")
            missing = await repo.find_by_username_or_email("bob")

        assert by_username.id == user.id
        assert by_email.id == user.id
        assert missing is None

    @pytest.mark.asyncio
    async def test_find_by_email_and_exists(self, test_database):
        user = create_test_user()
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(user)

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            assert (await repo.find_by_email("a@x.com")).id == user.id
            assert await repo.exists_by_username("alice") is True
            assert await repo.exists_by_username("bob") is False
            assert await repo.exists_by_email("A@x.com") is True

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, test_database):
        async with test_database.get_session() as session:
            assert await UserRepository(session=session).find_by_id(uuid7()) is None


@pytest.mark.integration
class TestUserRepositoryUpdate:
    @pytest.mark.asyncio
    async def test_mark_verified(self, test_database):
        user = create_test_user()
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(user)

        async with test_database.get_session() as session:
            updated = await UserRepository(session=session).mark_verified(user.id)

        assert updated.is_verified is True
        assert updated.updated_at >= user.updated_at

    @pytest.mark.asyncio
    async def test_update_password(self, test_database):
        user = create_test_user()
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(user)

        async with test_database.get_session() as session:
            await UserRepository(session=session).update_password(user.id, "$2b$new")

        async with test_database.get_session() as session:
            found = await UserRepository(session=session).find_by_id(user.id)
        assert found.password_hash == "$2b$new"

    @pytest.mark.asyncio
    async def test_update_missing_user_returns_none(self, test_database):
        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            assert await repo.mark_verified(uuid7()) is None
            assert await repo.update_password(uuid7(), "$2b$x") is None
