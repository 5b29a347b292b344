"""Result types for railway-oriented programming.

Every auth flow returns a Result instead of raising. A flow either succeeds
with a value or fails with a classified error that the boundary layer turns
into a transport response.

Usage:
    result = await login_handler.handle(cmd)
    match result:
        case Success(value=auth):
            set_cookies(auth.access_token, auth.refresh_token)
        case Failure(error=error):
            respond(error.code, error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The classified error (a DomainError or an error constant).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
