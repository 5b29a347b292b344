"""Password hashing protocol for domain layer.

The hashing primitive is an opaque one-way function with a compare
operation. Infrastructure provides the bcrypt adapter.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt with configurable cost factor

    Usage:
        password_hash = password_service.hash_password("secret1")
        if password_service.verify_password("secret1", password_hash):
            ...
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string. Same input yields a different hash on
            every call (random salt).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (including for
            a malformed hash; never raises).
        """
        ...
