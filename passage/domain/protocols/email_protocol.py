"""EmailProtocol - Port for the outbound notifier.

Delivery is fire-and-forget from the flow's point of view: the flow sends
once and never retries. Implementations report failures as values.
"""

from dataclasses import dataclass
from typing import Protocol

from passage.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailMessage:
    """Rendered outbound email.

    Attributes:
        to: Recipient address.
        subject: Subject line.
        text: Plain-text body.
        html: HTML body.
    """

    to: str
    subject: str
    text: str
    html: str


class EmailProtocol(Protocol):
    """Email service protocol (port).

    Implementations:
        - StubEmailService: logs the message (development, tests)
        - ResendEmailService: HTTP API delivery
    """

    async def send_email(self, message: EmailMessage) -> Result[str, str]:
        """Send one message.

        Args:
            message: Rendered message.

        Returns:
            Success(provider message id) or Failure(error description).
        """
        ...
