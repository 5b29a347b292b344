"""Classified errors returned by the auth flows.

Each class is one bucket of the error taxonomy. The boundary layer maps the
class (not the code) to a transport status:

- ConflictError: duplicate username or email
- AuthenticationError: bad credentials, invalid token, missing or expired session
- NotFoundError: unknown user, invalid or expired verification code
- RateLimitError: password reset requested too often
- InternalError: a store or notifier failure after the flow started mutating

Usage:
    from passage.core.errors import ConflictError
    from passage.core.enums import ErrorCode
    from passage.core.result import Failure

    return Failure(error=ConflictError(
        code=ErrorCode.USERNAME_ALREADY_EXISTS,
        message="Username already in use",
        resource_type="User",
        conflicting_field="username",
    ))
"""

from dataclasses import dataclass

from passage.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (User, VerificationCode).
        resource_id: Identifier that was looked up (may be truncated).
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate unique field).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (username, email).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, token, or session)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitError(DomainError):
    """Request rejected because a rate-limit window is still open.

    Attributes:
        retry_after_seconds: Seconds until the window closes, when known.
    """

    retry_after_seconds: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Collaborator failure (store write, timeout, email delivery).

    Attributes:
        operation: Name of the step that failed.
    """

    operation: str | None = None
