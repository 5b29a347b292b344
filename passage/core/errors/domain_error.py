"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every classified failure an auth flow can
return. Errors flow through the system as data (inside ``Failure``), never as
raised exceptions.

Usage:
    from passage.core.errors import DomainError
    from passage.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from passage.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
