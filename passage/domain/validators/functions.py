"""Centralized validation functions.

Validators are pure functions that raise ValueError on validation failure.
They run as pydantic AfterValidators on the Annotated types in
``passage.domain.types``; length limits live on the types themselves.
"""

import re

USERNAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
HEX_PATTERN = re.compile(r"^[a-fA-F0-9]+$")
PASSWORD_MAX_BYTES = 72

# Usernames that collide with client routes.
RESTRICTED_USERNAMES = frozenset(
    {
        "search",
        "notifications",
        "messages",
        "bookmarks",
        "settings",
        "login",
        "signup",
    }
)


def validate_username(v: str) -> str:
    """Validate username characters and reserved names.

    Args:
        v: Username to validate.

    Returns:
        Username unchanged.

    Raises:
        ValueError: If the username has invalid characters or is reserved.

    Example:
        >>> validate_username("alice_01")
        'alice_01'
        >>> validate_username("1alice")
        ValueError: Username must start with a letter or underscore ...
    """
    if not USERNAME_PATTERN.match(v):
        raise ValueError(
            "Username must start with a letter or underscore and contain "
            "only letters, numbers and underscores"
        )
    if v.lower() in RESTRICTED_USERNAMES:
        raise ValueError("Username is not available")
    return v


def validate_email(v: str) -> str:
    """Validate email format.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
    """
    if not EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v.lower()


def validate_display_name(v: str) -> str:
    """Reject names that are only whitespace; surrounding space is trimmed."""
    stripped = v.strip()
    if not stripped:
        raise ValueError("Name cannot be blank")
    return stripped


def validate_password_bytes(v: str) -> str:
    """Reject passwords longer than 72 bytes once UTF-8 encoded (bcrypt limit)."""
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
    return v


def validate_code_format(v: str) -> str:
    """Validate verification code format (hex string).

    Raises:
        ValueError: If code is empty or not hexadecimal.
    """
    if not v:
        raise ValueError("Code cannot be empty")
    if not HEX_PATTERN.match(v):
        raise ValueError("Code must be hexadecimal")
    return v
