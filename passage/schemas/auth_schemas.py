"""Authentication request/response schemas.

Pydantic models that enforce request pre-conditions and turn a valid
request into a command. Field rules come from the Annotated types in
``passage.domain.types``. Surrounding whitespace is stripped from every
string field before validation.

Kept separate from domain entities - these are transport concerns.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from passage.application.commands import (
    LoginUser,
    RegisterUser,
    RequestPasswordReset,
    ResetPassword,
    VerifyEmail,
)
from passage.application.dtos import PublicUser
from passage.domain.types import (
    DisplayName,
    Email,
    LoginPassword,
    Password,
    Username,
    UsernameOrEmail,
    VerificationCodeValue,
)


class _RequestModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


# =============================================================================
# Signup / Login
# =============================================================================


class SignupRequest(_RequestModel):
    """Request schema for signup."""

    name: DisplayName
    username: Username
    email: Email
    password: Password
    user_agent: str | None = Field(default=None, max_length=512)

    def to_command(self) -> RegisterUser:
        return RegisterUser(
            name=self.name,
            username=self.username,
            email=self.email,
            password=self.password,
            user_agent=self.user_agent,
        )


class LoginRequest(_RequestModel):
    """Request schema for login."""

    username_or_email: UsernameOrEmail
    password: LoginPassword
    user_agent: str | None = Field(default=None, max_length=512)

    def to_command(self) -> LoginUser:
        return LoginUser(
            username_or_email=self.username_or_email,
            password=self.password,
            user_agent=self.user_agent,
        )


# =============================================================================
# Email verification / Password reset
# =============================================================================


class VerifyEmailRequest(_RequestModel):
    """Request schema for email verification (code from the link path)."""

    code: VerificationCodeValue

    def to_command(self) -> VerifyEmail:
        return VerifyEmail(code=self.code)


class ForgotPasswordRequest(_RequestModel):
    """Request schema for forgot-password."""

    email: Email

    def to_command(self) -> RequestPasswordReset:
        return RequestPasswordReset(email=self.email)


class ResetPasswordRequest(_RequestModel):
    """Request schema for password reset."""

    code: VerificationCodeValue
    password: Password

    def to_command(self) -> ResetPassword:
        return ResetPassword(code=self.code, password=self.password)


# =============================================================================
# Responses
# =============================================================================


class UserResponse(BaseModel):
    """Public user resource. Never carries a password field."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    username: str
    email: str
    is_verified: bool
    avatar: str | None = None
    banner: str | None = None
    bio: str | None = None
    location: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, user: PublicUser) -> "UserResponse":
        return cls.model_validate(user)


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str = Field(..., examples=["Logout successful"])
