"""Security adapters (password hashing, token codec)."""

from passage.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from passage.infrastructure.security.jwt_token_codec import JWTTokenCodec

__all__ = ["BcryptPasswordService", "JWTTokenCodec"]
