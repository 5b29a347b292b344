"""Token codec protocol for domain layer.

Signs and verifies the two bearer token classes. Each purpose has its own
secret and default lifetime.

Token Strategy:
    - Access tokens: sub (user id) + session_id, 15 minutes by default
    - Refresh tokens: session_id only, 30 days by default
    - Verification is stateless; a refresh token is only usable while its
      session exists, which the session manager checks separately
"""

from datetime import timedelta
from typing import Any, Protocol

from passage.core.result import Result
from passage.domain.enums import TokenPurpose


class TokenCodecProtocol(Protocol):
    """Bearer token signing and verification interface.

    Implementations:
        - JWTTokenCodec: HMAC-SHA256 JWTs via PyJWT

    Usage:
        token = codec.sign({"session_id": str(session.id)}, TokenPurpose.REFRESH)

        match codec.verify(token, TokenPurpose.REFRESH):
            case Success(value=claims):
                session_id = UUID(claims["session_id"])
            case Failure(error=error):
                ...  # TokenError constant, no partial claims
    """

    def sign(
        self,
        claims: dict[str, Any],
        purpose: TokenPurpose,
        *,
        expires_in: timedelta | None = None,
    ) -> str:
        """Sign a claim set.

        Args:
            claims: Purpose-specific claims (string values).
            purpose: ACCESS or REFRESH; selects secret and default expiry.
            expires_in: Override of the purpose's default lifetime.

        Returns:
            Opaque token string.
        """
        ...

    def verify(
        self,
        token: str,
        purpose: TokenPurpose,
        *,
        allow_expired: bool = False,
    ) -> Result[dict[str, Any], str]:
        """Verify a token and return its claims.

        Args:
            token: Token string to verify.
            purpose: Expected purpose (secret and audience).
            allow_expired: Skip only the expiry check.

        Returns:
            Success(claims) or Failure(TokenError constant).
        """
        ...
