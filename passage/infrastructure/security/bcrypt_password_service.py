"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with bcrypt.

Cost factor is logarithmic: each +1 doubles computation time
(10 = ~60ms, 12 = ~250ms, 14 = ~1s). Tests use 10.

bcrypt only accepts inputs up to 72 bytes; request validation rejects
longer passwords before they reach this service.
"""

import bcrypt

MIN_COST_FACTOR = 10
MAX_COST_FACTOR = 20


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from passage.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("secret1")
        password_service.verify_password("secret1", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt rounds, between 10 and 20.

        Raises:
            ValueError: If cost_factor is out of range.
        """
        if cost_factor < MIN_COST_FACTOR:
            msg = f"Cost factor must be at least {MIN_COST_FACTOR} for security"
            raise ValueError(msg)
        if cost_factor > MAX_COST_FACTOR:
            msg = f"Cost factor above {MAX_COST_FACTOR} is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            60-character bcrypt string ($2b$<cost>$<salt><hash>), with a
            fresh random salt on every call.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Compare a plaintext password with a stored hash.

        Constant-time. Returns False (never raises) for a malformed hash
        or an over-long password.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
