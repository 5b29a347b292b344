"""Bearer token purposes.

Each purpose is signed with its own secret and default lifetime, and the
purpose is also written to the ``aud`` claim so a token of one class is
never accepted as the other.
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """Bearer token class."""

    ACCESS = "access"
    REFRESH = "refresh"
