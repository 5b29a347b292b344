"""Application environment types.

Used by Settings and the composition root to pick adapters:
- DEVELOPMENT: console logging, stub email delivery unless configured
- TESTING: automated test execution, JSON logs
- CI: continuous integration, JSON logs
- PRODUCTION: JSON logs, real email delivery
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
