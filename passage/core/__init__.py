"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Classified error dataclasses
- Settings

The core module has NO dependencies on other application layers.
"""

from passage.core.enums import ErrorCode
from passage.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    RateLimitError,
)
from passage.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "InternalError",
    "NotFoundError",
    "RateLimitError",
    "Result",
    "Success",
]
