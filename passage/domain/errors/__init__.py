"""Domain error constants."""

from passage.domain.errors.token_error import TokenError

__all__ = ["TokenError"]
