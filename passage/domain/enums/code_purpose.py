"""Verification code purposes.

A code is only redeemable by the flow matching its purpose: an email
verification code cannot reset a password and vice versa.
"""

from enum import Enum


class CodePurpose(str, Enum):
    """Purpose tag stored on every verification code."""

    EMAIL_VERIFICATION = "email_verification"
    PASSWORD_RESET = "password_reset"
