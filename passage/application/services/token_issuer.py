"""Token pair minting for a session."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from passage.domain.entities import Session
from passage.domain.enums import TokenPurpose
from passage.domain.protocols import TokenCodecProtocol


def claim_uuid(claims: dict[str, Any], name: str) -> UUID | None:
    """Read a UUID claim, None when missing or not a UUID string."""
    value = claims.get(name)
    if not isinstance(value, str):
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


class TokenIssuer:
    """Mints access and refresh tokens bound to a session.

    Access claims are ``sub`` (user id) and ``session_id``; refresh claims
    are ``session_id`` only. A refresh token expires together with its
    session.
    """

    def __init__(self, token_codec: TokenCodecProtocol) -> None:
        self._token_codec = token_codec

    def access_token(self, user_id: UUID, session_id: UUID) -> str:
        return self._token_codec.sign(
            {"sub": str(user_id), "session_id": str(session_id)},
            TokenPurpose.ACCESS,
        )

    def refresh_token(self, session: Session) -> str:
        return self._token_codec.sign(
            {"session_id": str(session.id)},
            TokenPurpose.REFRESH,
            expires_in=session.remaining(datetime.now(UTC)),
        )

    def pair(self, session: Session) -> tuple[str, str]:
        """Return (access_token, refresh_token) for a fresh session."""
        return (
            self.access_token(session.user_id, session.id),
            self.refresh_token(session),
        )
