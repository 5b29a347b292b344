"""Unit tests for ResetPasswordHandler.

Tests cover:
- Successful reset (code claimed, new hash stored, all sessions deleted)
- Invalid, expired or already claimed code changes nothing
- Password update failure releases the code and keeps sessions
- Session cleanup failure releases the code so the link can be retried
"""

from unittest.mock import AsyncMock, Mock

import pytest

from passage.application.commands.auth_commands import ResetPassword
from passage.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from passage.core.enums import ErrorCode
from passage.core.errors import InternalError, NotFoundError
from passage.core.result import Failure, Success
from passage.domain.enums import CodePurpose
from tests.conftest import create_test_code, create_test_user


@pytest.fixture
def deps(mock_logger):
    user = create_test_user(password_hash="$2b$12$newhash")
    record = create_test_code(user_id=user.id, purpose=CodePurpose.PASSWORD_RESET)

    user_repo = AsyncMock()
    user_repo.update_password.return_value = user

    password_service = Mock()
    password_service.hash_password.return_value = "$2b$12$newhash"

    code_service = AsyncMock()
    code_service.claim.return_value = Success(value=record)

    session_manager = AsyncMock()
    session_manager.delete_all_for_user.return_value = 2

    return {
        "user": user,
        "record": record,
        "user_repo": user_repo,
        "password_service": password_service,
        "code_service": code_service,
        "session_manager": session_manager,
        "logger": mock_logger,
    }


def make_handler(deps) -> ResetPasswordHandler:
    return ResetPasswordHandler(
        user_repo=deps["user_repo"],
        password_service=deps["password_service"],
        code_service=deps["code_service"],
        session_manager=deps["session_manager"],
        logger=deps["logger"],
    )


@pytest.mark.unit
class TestResetPasswordHandler:
    @pytest.mark.asyncio
    async def test_reset_updates_password_and_kills_sessions(self, deps):
        # Arrange
        record = deps["record"]

        # Act
        result = await make_handler(deps).handle(
            ResetPassword(code=record.code, password="newpass")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.id == deps["user"].id
        deps["code_service"].claim.assert_awaited_once_with(
            record.code, CodePurpose.PASSWORD_RESET
        )
        deps["password_service"].hash_password.assert_called_once_with("newpass")
        deps["user_repo"].update_password.assert_awaited_once_with(
            record.user_id, "$2b$12$newhash"
        )
        deps["session_manager"].delete_all_for_user.assert_awaited_once_with(
            deps["user"].id
        )
        deps["code_service"].release.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unclaimable_code_changes_nothing(self, deps):
        not_found = NotFoundError(
            code=ErrorCode.VERIFICATION_CODE_NOT_FOUND,
            message="Invalid or expired verification code",
            resource_type="VerificationCode",
            resource_id="abababab...",
        )
        deps["code_service"].claim.return_value = Failure(error=not_found)

        result = await make_handler(deps).handle(
            ResetPassword(code="ab" * 32, password="newpass")
        )

        assert result == Failure(error=not_found)
        deps["password_service"].hash_password.assert_not_called()
        deps["user_repo"].update_password.assert_not_awaited()
        deps["session_manager"].delete_all_for_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_failure_releases_code_and_keeps_sessions(self, deps):
        deps["user_repo"].update_password.return_value = None

        result = await make_handler(deps).handle(
            ResetPassword(code="ab" * 32, password="newpass")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InternalError)
        assert result.error.code == ErrorCode.USER_UPDATE_FAILED
        deps["code_service"].release.assert_awaited_once_with(deps["record"])
        deps["session_manager"].delete_all_for_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_session_cleanup_failure_releases_code(self, deps):
        # Arrange
        deps["session_manager"].delete_all_for_user.side_effect = TimeoutError()

        # Act
        result = await make_handler(deps).handle(
            ResetPassword(code="ab" * 32, password="newpass")
        )

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, InternalError)
        assert result.error.code == ErrorCode.INTERNAL_ERROR
        deps["code_service"].release.assert_awaited_once_with(deps["record"])
