"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, SESSION_*)
- Rate limit errors (*_RATE_LIMITED)
- Internal errors (*_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    VERIFICATION_CODE_NOT_FOUND = "verification_code_not_found"

    # Conflict errors
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    USER_ALREADY_EXISTS = "user_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    REFRESH_TOKEN_MISSING = "refresh_token_missing"
    SESSION_EXPIRED = "session_expired"

    # Rate limit errors
    PASSWORD_RESET_RATE_LIMITED = "password_reset_rate_limited"

    # Internal errors
    USER_UPDATE_FAILED = "user_update_failed"
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
    INTERNAL_ERROR = "internal_error"
