"""JWT token codec (adapter).

Implements TokenCodecProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - Separate 256-bit minimum secrets for access and refresh tokens
    - ``aud`` claim set to the token purpose, so an access token never
      verifies as a refresh token (or the reverse) even under a shared key
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidSignatureError,
    InvalidTokenError,
)
from uuid_extensions import uuid7

from passage.core.result import Failure, Result, Success
from passage.domain.enums import TokenPurpose
from passage.domain.errors import TokenError

MIN_SECRET_LENGTH = 32


class JWTTokenCodec:
    """JWT signing and verification for both token purposes.

    Usage:
        codec = JWTTokenCodec(
            access_secret=settings.access_token_secret,
            refresh_secret=settings.refresh_token_secret,
        )
        token = codec.sign({"session_id": str(sid)}, TokenPurpose.REFRESH)
        result = codec.verify(token, TokenPurpose.REFRESH)
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_expiration_minutes: int = 15,
        refresh_expiration_days: int = 30,
    ) -> None:
        """Initialize JWT codec.

        Args:
            access_secret: HMAC key for access tokens (>= 32 characters).
            refresh_secret: HMAC key for refresh tokens (>= 32 characters).
            access_expiration_minutes: Default access token lifetime.
            refresh_expiration_days: Default refresh token lifetime.

        Raises:
            ValueError: If a secret is too short.
        """
        for secret in (access_secret, refresh_secret):
            if len(secret) < MIN_SECRET_LENGTH:
                msg = "JWT secret key must be at least 32 bytes (256 bits)"
                raise ValueError(msg)

        self._secrets = {
            TokenPurpose.ACCESS: access_secret,
            TokenPurpose.REFRESH: refresh_secret,
        }
        self._default_lifetimes = {
            TokenPurpose.ACCESS: timedelta(minutes=access_expiration_minutes),
            TokenPurpose.REFRESH: timedelta(days=refresh_expiration_days),
        }
        self._algorithm = "HS256"  # HMAC-SHA256

    def sign(
        self,
        claims: dict[str, Any],
        purpose: TokenPurpose,
        *,
        expires_in: timedelta | None = None,
    ) -> str:
        """Sign claims as a JWT for the given purpose.

        Registered claims (iat, exp, jti, aud) are added here and override
        same-named entries in ``claims``.

        Example:
            >>> codec = JWTTokenCodec("a" * 32, "b" * 32)
            >>> token = codec.sign({"session_id": "..."}, TokenPurpose.REFRESH)
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        lifetime = expires_in
        if lifetime is None:
            lifetime = self._default_lifetimes[purpose]

        payload = {
            **claims,
            "aud": purpose.value,
            "iat": int(now.timestamp()),  # Issued at
            "exp": int((now + lifetime).timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID
        }
        token: str = jwt.encode(
            payload, self._secrets[purpose], algorithm=self._algorithm
        )
        return token

    def verify(
        self,
        token: str,
        purpose: TokenPurpose,
        *,
        allow_expired: bool = False,
    ) -> Result[dict[str, Any], str]:
        """Verify a JWT and extract its claims.

        Args:
            token: JWT string.
            purpose: Expected purpose (selects secret and audience).
            allow_expired: Skip the expiry check only; signature and
                audience are still enforced.

        Returns:
            Success(claims) or Failure(TokenError constant).
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secrets[purpose],
                algorithms=[self._algorithm],
                audience=purpose.value,
                options={
                    "require": ["exp", "iat", "aud"],
                    "verify_exp": not allow_expired,
                },
            )
            return Success(value=payload)

        except ExpiredSignatureError:
            return Failure(error=TokenError.EXPIRED_TOKEN)
        except InvalidSignatureError:
            return Failure(error=TokenError.INVALID_TOKEN)
        except DecodeError:
            return Failure(error=TokenError.MALFORMED_TOKEN)
        except InvalidTokenError:
            return Failure(error=TokenError.INVALID_TOKEN)
