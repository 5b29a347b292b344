"""Email service implementations.

- StubEmailService: logs messages (development and tests)
- ResendEmailService: Resend HTTP API
"""

from passage.infrastructure.email.resend_email_service import ResendEmailService
from passage.infrastructure.email.stub_email_service import StubEmailService

__all__ = ["ResendEmailService", "StubEmailService"]
