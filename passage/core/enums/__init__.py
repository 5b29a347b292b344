"""Core enums package.

Usage:
    from passage.core.enums import ErrorCode, Environment
"""

from passage.core.enums.environment import Environment
from passage.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
