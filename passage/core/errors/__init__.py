"""Core errors package.

Usage:
    from passage.core.errors import DomainError, ConflictError, NotFoundError
"""

from passage.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    RateLimitError,
)
from passage.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "RateLimitError",
    "InternalError",
]
