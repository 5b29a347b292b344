"""Unit tests for LogoutUserHandler.

Tests cover:
- Valid token deletes its session
- Expired token still logs out (lenient verification)
- Missing, invalid or session-less token succeeds without side effects
- Store failure maps to InternalError
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from passage.application.commands.auth_commands import LogoutUser
from passage.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from passage.core.errors import InternalError
from passage.core.result import Failure, Success
from passage.domain.enums import TokenPurpose
from passage.domain.errors import TokenError


@pytest.fixture
def session_id():
    return uuid7()


@pytest.fixture
def deps(mock_logger, session_id):
    token_codec = Mock()
    token_codec.verify.return_value = Success(
        value={"sub": str(uuid7()), "session_id": str(session_id)}
    )
    session_manager = AsyncMock()
    session_manager.delete.return_value = True
    return {
        "token_codec": token_codec,
        "session_manager": session_manager,
        "logger": mock_logger,
    }


def make_handler(deps) -> LogoutUserHandler:
    return LogoutUserHandler(
        token_codec=deps["token_codec"],
        session_manager=deps["session_manager"],
        logger=deps["logger"],
    )


@pytest.mark.unit
class TestLogoutUserHandler:
    @pytest.mark.asyncio
    async def test_logout_deletes_session(self, deps, session_id):
        result = await make_handler(deps).handle(LogoutUser(access_token="tok"))

        assert result == Success(value=None)
        deps["session_manager"].delete.assert_awaited_once_with(session_id)

    @pytest.mark.asyncio
    async def test_logout_accepts_expired_token(self, deps):
        await make_handler(deps).handle(LogoutUser(access_token="tok"))

        deps["token_codec"].verify.assert_called_once_with(
            "tok", TokenPurpose.ACCESS, allow_expired=True
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token_succeeds(self, deps, token):
        result = await make_handler(deps).handle(LogoutUser(access_token=token))

        assert result == Success(value=None)
        deps["token_codec"].verify.assert_not_called()
        deps["session_manager"].delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_token_succeeds_without_delete(self, deps):
        deps["token_codec"].verify.return_value = Failure(
            error=TokenError.INVALID_TOKEN
        )

        result = await make_handler(deps).handle(LogoutUser(access_token="forged"))

        assert result == Success(value=None)
        deps["session_manager"].delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_token_without_session_id_succeeds(self, deps):
        deps["token_codec"].verify.return_value = Success(value={"sub": "x"})

        result = await make_handler(deps).handle(LogoutUser(access_token="tok"))

        assert result == Success(value=None)
        deps["session_manager"].delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_already_deleted_session_succeeds(self, deps):
        deps["session_manager"].delete.return_value = False

        result = await make_handler(deps).handle(LogoutUser(access_token="tok"))

        assert result == Success(value=None)

    @pytest.mark.asyncio
    async def test_store_failure_returns_internal_error(self, deps):
        deps["session_manager"].delete.side_effect = RuntimeError("db down")

        result = await make_handler(deps).handle(LogoutUser(access_token="tok"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, InternalError)
        assert result.error.operation == "logout"
