"""Authenticate access token query handler.

Resolves a bearer access token to the caller's user and session ids.
Validation is stateless: signature, audience and expiry only.
"""

from passage.application.dtos import AuthContext
from passage.application.queries.auth_queries import AuthenticateAccessToken
from passage.application.services import claim_uuid
from passage.core.enums import ErrorCode
from passage.core.errors import AuthenticationError
from passage.core.result import Failure, Result, Success
from passage.domain.enums import TokenPurpose
from passage.domain.protocols import TokenCodecProtocol


class AuthenticateAccessTokenHandler:
    """Handler for access token authentication."""

    def __init__(self, token_codec: TokenCodecProtocol) -> None:
        self._token_codec = token_codec

    async def handle(
        self, query: AuthenticateAccessToken
    ) -> Result[AuthContext, AuthenticationError]:
        """Handle access token authentication query.

        Returns:
            Success(AuthContext) or Failure(AuthenticationError).
        """
        if not query.access_token:
            return _unauthorized()

        match self._token_codec.verify(query.access_token, TokenPurpose.ACCESS):
            case Failure():
                return _unauthorized()
            case Success(value=claims):
                user_id = claim_uuid(claims, "sub")
                session_id = claim_uuid(claims, "session_id")

        if user_id is None or session_id is None:
            return _unauthorized()
        return Success(value=AuthContext(user_id=user_id, session_id=session_id))


def _unauthorized() -> Failure[AuthenticationError]:
    return Failure(
        error=AuthenticationError(
            code=ErrorCode.TOKEN_INVALID,
            message="Invalid access token",
        )
    )
