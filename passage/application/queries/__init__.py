"""Query definitions (CQRS read side)."""

from passage.application.queries.auth_queries import AuthenticateAccessToken, GetUser

__all__ = ["AuthenticateAccessToken", "GetUser"]
