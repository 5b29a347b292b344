"""Stub email service for development and tests.

Logs each message instead of sending it and reports a synthetic message id.
"""

from uuid_extensions import uuid7

from passage.core.result import Result, Success
from passage.domain.protocols import EmailMessage, LoggerProtocol


class StubEmailService:
    """EmailProtocol implementation that only logs.

    Sent messages are kept in ``outbox`` so tests can read the links back.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.outbox: list[EmailMessage] = []

    async def send_email(self, message: EmailMessage) -> Result[str, str]:
        email_id = f"stub-{uuid7()}"
        self.outbox.append(message)
        self._logger.info(
            "stub_email_sent",
            email_id=email_id,
            to=message.to,
            subject=message.subject,
        )
        return Success(value=email_id)
