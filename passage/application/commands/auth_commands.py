"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Field pre-conditions are enforced by the request schemas that build
  commands (see ``passage.schemas``)
"""

from dataclasses import dataclass

from passage.domain.types import (
    DisplayName,
    Email,
    LoginPassword,
    Password,
    Username,
    UsernameOrEmail,
    VerificationCodeValue,
)


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Create an account and log it in.

    Attributes:
        name: Display name.
        username: Unique handle.
        email: Unique email (lowercased).
        password: Plaintext password, hashed by the handler.
        user_agent: Client user agent recorded on the session.

    Example:
        >>> command = RegisterUser(
        ...     name="Alice",
        ...     username="alice",
        ...     email="a@x.com",
        ...     password="secret1",
        ... )
        >>> result = await handler.handle(command)
    """

    name: DisplayName
    username: Username
    email: Email
    password: Password
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with username-or-email and password, opening a session.

    Attributes:
        username_or_email: Either identifier, matched exactly.
        password: Plaintext password.
        user_agent: Client user agent recorded on the session.
    """

    username_or_email: UsernameOrEmail
    password: LoginPassword
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new access token.

    Attributes:
        refresh_token: Refresh token from the client, None when the client
            sent none.
    """

    refresh_token: str | None


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Redeem an email verification code.

    Attributes:
        code: Verification code from the emailed link.
    """

    code: VerificationCodeValue


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Send a password reset link.

    Attributes:
        email: Account email.
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Redeem a password reset code and set a new password.

    Attributes:
        code: Reset code from the emailed link.
        password: New plaintext password.
    """

    code: VerificationCodeValue
    password: Password


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """End the session referenced by an access token.

    Attributes:
        access_token: Access token from the client (may be expired or absent).
    """

    access_token: str | None
