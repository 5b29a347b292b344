"""Refresh Access Token handler.

Flow:
1. Reject a missing refresh token
2. Verify refresh token (signature, audience, expiry)
3. Load the active session it references
4. Renew the session if it is close to expiry
5. Mint a new refresh token only if the session was renewed
6. Mint a new access token unconditionally
7. Return Success(RefreshResult)

A refresh token stops working as soon as its session is deleted (logout,
password reset) even if the token itself has not expired.
"""

from passage.application.commands.auth_commands import RefreshAccessToken
from passage.application.dtos import RefreshResult
from passage.application.services import SessionManager, TokenIssuer, claim_uuid
from passage.core.enums import ErrorCode
from passage.core.errors import AuthenticationError, DomainError, InternalError
from passage.core.result import Failure, Result, Success
from passage.domain.enums import TokenPurpose
from passage.domain.protocols import LoggerProtocol, TokenCodecProtocol


def _invalid_refresh_token() -> Failure[AuthenticationError]:
    return Failure(
        error=AuthenticationError(
            code=ErrorCode.TOKEN_INVALID,
            message="Invalid refresh token",
        )
    )


class RefreshAccessTokenHandler:
    """Handler for refresh access token command.

    Implements the sliding session window: the refresh token is rotated
    only when the session expiry moves.
    """

    def __init__(
        self,
        token_codec: TokenCodecProtocol,
        session_manager: SessionManager,
        token_issuer: TokenIssuer,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize refresh handler with dependencies.

        Args:
            token_codec: Verifies the presented refresh token.
            session_manager: Session lookup and renewal.
            token_issuer: Mints replacement tokens.
            logger: Structured logger.
        """
        self._token_codec = token_codec
        self._session_manager = session_manager
        self._token_issuer = token_issuer
        self._logger = logger

    async def handle(
        self, cmd: RefreshAccessToken
    ) -> Result[RefreshResult, DomainError]:
        """Handle refresh access token command.

        Returns:
            Success(RefreshResult); refresh_token is None unless renewed.
            Failure(AuthenticationError) for a missing or invalid token or
            a missing or expired session.
            Failure(InternalError) on a store failure.
        """
        # Step 1: Missing token
        if not cmd.refresh_token:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.REFRESH_TOKEN_MISSING,
                    message="Missing refresh token",
                )
            )

        # Step 2: Verify token
        match self._token_codec.verify(cmd.refresh_token, TokenPurpose.REFRESH):
            case Failure(error=reason):
                self._logger.info("refresh_token_rejected", reason=reason)
                return _invalid_refresh_token()
            case Success(value=claims):
                session_id = claim_uuid(claims, "session_id")

        if session_id is None:
            self._logger.info("refresh_token_rejected", reason="missing session_id")
            return _invalid_refresh_token()

        try:
            # Step 3: Active session
            match await self._session_manager.find_active(session_id):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=session):
                    pass

            # Step 4: Sliding renewal
            match await self._session_manager.renew_if_near_expiry(session):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=(session, rotated)):
                    pass

            # Step 5-6: Tokens
            refresh_token = (
                self._token_issuer.refresh_token(session) if rotated else None
            )
            access_token = self._token_issuer.access_token(session.user_id, session.id)

            self._logger.info(
                "access_token_refreshed",
                session_id=str(session.id),
                rotated=rotated,
            )
            return Success(
                value=RefreshResult(
                    access_token=access_token,
                    refresh_token=refresh_token,
                )
            )

        except Exception as e:
            self._logger.error(
                "access_token_refresh_failed",
                error=e,
                session_id=str(session_id),
            )
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message="Token refresh failed",
                    operation="refresh",
                )
            )
