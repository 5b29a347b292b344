"""Unit tests for LoginUserHandler.

Tests cover:
- Successful login by username or email (new session, token pair)
- Unknown identifier and wrong password fail identically
- Unknown identifier still pays for one password comparison
- No session is opened on failure
- Store failure maps to InternalError
"""

from unittest.mock import AsyncMock, Mock

import pytest

from passage.application.commands.auth_commands import LoginUser
from passage.application.commands.handlers.login_user_handler import LoginUserHandler
from passage.application.dtos import AuthResult
from passage.core.enums import ErrorCode
from passage.core.errors import AuthenticationError, InternalError
from passage.core.result import Failure, Success
from tests.conftest import create_test_session, create_test_user


@pytest.fixture
def deps(mock_logger):
    user = create_test_user()
    user_repo = AsyncMock()
    user_repo.find_by_username_or_email.return_value = user

    password_service = Mock()
    password_service.verify_password.return_value = True

    session = create_test_session(user_id=user.id)
    session_manager = AsyncMock()
    session_manager.create.return_value = session

    token_issuer = Mock()
    token_issuer.pair.return_value = ("access_jwt", "refresh_jwt")

    return {
        "user": user,
        "session": session,
        "user_repo": user_repo,
        "password_service": password_service,
        "session_manager": session_manager,
        "token_issuer": token_issuer,
        "logger": mock_logger,
    }


def make_handler(deps) -> LoginUserHandler:
    return LoginUserHandler(
        user_repo=deps["user_repo"],
        password_service=deps["password_service"],
        session_manager=deps["session_manager"],
        token_issuer=deps["token_issuer"],
        logger=deps["logger"],
    )


@pytest.mark.unit
class TestLoginUserHandlerSuccess:
    @pytest.mark.asyncio
    async def test_login_success_returns_tokens(self, deps):
        # Arrange
        handler = make_handler(deps)
        command = LoginUser(
            username_or_email="alice", password="secret1", user_agent="ua"
        )

        # Act
        result = await handler.handle(command)

        # Assert
        assert isinstance(result, Success)
        assert isinstance(result.value, AuthResult)
        assert result.value.user.id == deps["user"].id
        assert result.value.access_token == "access_jwt"
        assert result.value.refresh_token == "refresh_jwt"
        deps["session_manager"].create.assert_awaited_once_with(
            deps["user"].id, "ua"
        )

    @pytest.mark.asyncio
    async def test_login_verifies_against_stored_hash(self, deps):
        handler = make_handler(deps)

        await handler.handle(LoginUser(username_or_email="a@x.com", password="pw"))

        deps["user_repo"].find_by_username_or_email.assert_awaited_once_with(
            "a@x.com"
        )
        deps["password_service"].verify_password.assert_called_once_with(
            "pw", deps["user"].password_hash
        )


@pytest.mark.unit
class TestLoginUserHandlerInvalidCredentials:
    @pytest.mark.asyncio
    async def test_unknown_user_and_wrong_password_fail_identically(self, deps):
        # Arrange
        handler = make_handler(deps)
        command = LoginUser(username_or_email="alice", password="wrong")

        # Act
        deps["password_service"].verify_password.return_value = False
        wrong_password = await handler.handle(command)

        deps["user_repo"].find_by_username_or_email.return_value = None
        unknown_user = await handler.handle(command)

        # Assert
        assert isinstance(wrong_password, Failure)
        assert isinstance(wrong_password.error, AuthenticationError)
        assert wrong_password.error.code == ErrorCode.INVALID_CREDENTIALS
        assert wrong_password == unknown_user

    @pytest.mark.asyncio
    async def test_failed_login_opens_no_session(self, deps):
        deps["password_service"].verify_password.return_value = False
        handler = make_handler(deps)

        await handler.handle(LoginUser(username_or_email="alice", password="x"))

        deps["session_manager"].create.assert_not_awaited()
        deps["token_issuer"].pair.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user_is_compared_against_dummy_hash(self, deps):
        # Arrange
        deps["user_repo"].find_by_username_or_email.return_value = None
        deps["password_service"].hash_password.return_value = "$2b$12$dummy"
        handler = make_handler(deps)

        # Act
        result = await handler.handle(
            LoginUser(username_or_email="ghost", password="pw")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        deps["password_service"].verify_password.assert_called_once_with(
            "pw", "$2b$12$dummy"
        )

    @pytest.mark.asyncio
    async def test_dummy_hash_is_computed_once_per_service(self, deps):
        deps["user_repo"].find_by_username_or_email.return_value = None
        handler = make_handler(deps)

        await handler.handle(LoginUser(username_or_email="ghost", password="a"))
        await handler.handle(LoginUser(username_or_email="ghost", password="b"))

        deps["password_service"].hash_password.assert_called_once()
        assert deps["password_service"].verify_password.call_count == 2


@pytest.mark.unit
class TestLoginUserHandlerFailures:
    @pytest.mark.asyncio
    async def test_store_failure_returns_internal_error(self, deps):
        deps["session_manager"].create.side_effect = RuntimeError("db down")
        handler = make_handler(deps)

        result = await handler.handle(
            LoginUser(username_or_email="alice", password="secret1")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InternalError)
