"""Unit tests for TokenIssuer and claim_uuid.

Tests cover:
- Access token claims (sub, session_id)
- Refresh token claims (session_id) and expiry bound to the session
- claim_uuid parsing
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from passage.application.services import TokenIssuer, claim_uuid
from passage.domain.enums import TokenPurpose
from tests.conftest import create_test_session

FROZEN_NOW = datetime(2026, 3, 1, 9, 0, tzinfo=UTC)


@pytest.fixture
def token_codec():
    codec = Mock()
    codec.sign.side_effect = lambda claims, purpose, **kwargs: f"{purpose.value}-jwt"
    return codec


@pytest.mark.unit
class TestTokenIssuer:
    def test_access_token_claims(self, token_codec):
        issuer = TokenIssuer(token_codec=token_codec)
        user_id, session_id = uuid7(), uuid7()

        token = issuer.access_token(user_id, session_id)

        assert token == "access-jwt"
        token_codec.sign.assert_called_once_with(
            {"sub": str(user_id), "session_id": str(session_id)},
            TokenPurpose.ACCESS,
        )

    @freeze_time(FROZEN_NOW)
    def test_refresh_token_expires_with_session(self, token_codec):
        issuer = TokenIssuer(token_codec=token_codec)
        session = create_test_session(expires_in=timedelta(days=3))

        token = issuer.refresh_token(session)

        assert token == "refresh-jwt"
        token_codec.sign.assert_called_once_with(
            {"session_id": str(session.id)},
            TokenPurpose.REFRESH,
            expires_in=timedelta(days=3),
        )

    def test_pair_returns_access_then_refresh(self, token_codec):
        issuer = TokenIssuer(token_codec=token_codec)

        access, refresh = issuer.pair(create_test_session())

        assert (access, refresh) == ("access-jwt", "refresh-jwt")


@pytest.mark.unit
class TestClaimUuid:
    def test_valid_uuid_claim(self):
        value = uuid7()

        assert claim_uuid({"session_id": str(value)}, "session_id") == value

    @pytest.mark.parametrize(
        "claims",
        [{}, {"session_id": None}, {"session_id": 42}, {"session_id": "nope"}],
    )
    def test_invalid_claims_return_none(self, claims):
        assert claim_uuid(claims, "session_id") is None
