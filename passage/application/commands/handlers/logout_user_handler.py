"""Logout User handler.

Flow:
1. Verify the access token leniently (expired tokens accepted)
2. If it names a session, delete that session
3. Return Success

A missing, forged or session-less token is not an error: the caller ends
up logged out either way.
"""

from passage.application.commands.auth_commands import LogoutUser
from passage.application.services import SessionManager, claim_uuid
from passage.core.enums import ErrorCode
from passage.core.errors import DomainError, InternalError
from passage.core.result import Failure, Result, Success
from passage.domain.enums import TokenPurpose
from passage.domain.protocols import LoggerProtocol, TokenCodecProtocol


class LogoutUserHandler:
    """Handler for logout command."""

    def __init__(
        self,
        token_codec: TokenCodecProtocol,
        session_manager: SessionManager,
        logger: LoggerProtocol,
    ) -> None:
        self._token_codec = token_codec
        self._session_manager = session_manager
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[None, DomainError]:
        """Handle logout command.

        Returns:
            Success(None) whatever the token state.
            Failure(InternalError) only if the store fails during delete.
        """
        if not cmd.access_token:
            return Success(value=None)

        match self._token_codec.verify(
            cmd.access_token, TokenPurpose.ACCESS, allow_expired=True
        ):
            case Failure(error=reason):
                self._logger.debug("logout_token_ignored", reason=reason)
                return Success(value=None)
            case Success(value=claims):
                session_id = claim_uuid(claims, "session_id")

        if session_id is None:
            return Success(value=None)

        try:
            await self._session_manager.delete(session_id)
        except Exception as e:
            self._logger.error(
                "logout_failed",
                error=e,
                session_id=str(session_id),
            )
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Logout failed",
                    operation="logout",
                )
            )

        self._logger.info("user_logged_out", session_id=str(session_id))
        return Success(value=None)
