"""Query handlers (CQRS read side)."""

from passage.application.queries.handlers.authenticate_access_token_handler import (
    AuthenticateAccessTokenHandler,
)
from passage.application.queries.handlers.get_user_handler import GetUserHandler

__all__ = ["AuthenticateAccessTokenHandler", "GetUserHandler"]
