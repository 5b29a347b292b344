"""Domain enums."""

from passage.domain.enums.code_purpose import CodePurpose
from passage.domain.enums.token_purpose import TokenPurpose

__all__ = ["CodePurpose", "TokenPurpose"]
