"""Authentication queries (CQRS read operations).

Queries never change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Fetch the public view of a user.

    Attributes:
        user_id: User to fetch.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AuthenticateAccessToken:
    """Resolve an access token to the caller's identity.

    Attributes:
        access_token: Access token presented by the client.
    """

    access_token: str | None
