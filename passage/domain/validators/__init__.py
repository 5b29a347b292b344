"""Validators package exports."""

from passage.domain.validators.functions import (
    RESTRICTED_USERNAMES,
    validate_code_format,
    validate_display_name,
    validate_email,
    validate_password_bytes,
    validate_username,
)

__all__ = [
    "RESTRICTED_USERNAMES",
    "validate_code_format",
    "validate_display_name",
    "validate_email",
    "validate_password_bytes",
    "validate_username",
]
