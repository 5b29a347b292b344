"""Annotated types with centralized validation.

Define validation once, use in every request schema.

Usage:
    from passage.domain.types import Email, Password, Username

    class SignupRequest(BaseModel):
        username: Username
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from passage.domain.validators import (
    validate_code_format,
    validate_display_name,
    validate_email,
    validate_password_bytes,
    validate_username,
)

# ============================================================================
# Profile Types
# ============================================================================

DisplayName = Annotated[
    str,
    Field(min_length=1, max_length=50, description="Display name"),
    AfterValidator(validate_display_name),
]

Username = Annotated[
    str,
    Field(
        min_length=4,
        max_length=15,
        description="Unique handle",
        examples=["alice_01"],
    ),
    AfterValidator(validate_username),
]
"""Username.

Validation:
- 4 to 15 characters
- Starts with a letter or underscore; letters, digits and underscores only
- Not one of the reserved route names (search, settings, login, ...)
"""

# ============================================================================
# Authentication Types
# ============================================================================

Email = Annotated[
    str,
    Field(
        min_length=3,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, normalized to lowercase."""

Password = Annotated[
    str,
    Field(
        min_length=6,
        max_length=72,
        description="Password",
        examples=["secret1"],
    ),
    AfterValidator(validate_password_bytes),
]
"""Password.

6 to 72 characters and at most 72 bytes in UTF-8, the bcrypt input limit.
"""

LoginPassword = Annotated[
    str,
    Field(min_length=1, max_length=255, description="Password as typed at login"),
]
"""Login password. Not held to the signup rules so older passwords still work."""

UsernameOrEmail = Annotated[
    str,
    Field(min_length=1, max_length=255, description="Username or email"),
]

VerificationCodeValue = Annotated[
    str,
    Field(
        min_length=1,
        max_length=128,
        description="Email verification or password reset code (hex)",
        examples=["9f86d081884c7d65"],
    ),
    AfterValidator(validate_code_format),
]
