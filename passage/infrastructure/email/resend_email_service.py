"""Resend email service (adapter).

Sends transactional email through the Resend HTTP API using httpx.

API:
    POST {base_url}/emails
    Authorization: Bearer <api key>
    Body: {"from", "to", "subject", "text", "html"}
    200 -> {"id": "<message id>"}

Failures (timeouts, connection errors, non-2xx, a body without an id) are
returned as ``Failure(str)``; nothing is retried.
"""

import httpx

from passage.core.result import Failure, Result, Success
from passage.domain.protocols import EmailMessage, LoggerProtocol

DEFAULT_TIMEOUT = 10.0


class ResendEmailService:
    """EmailProtocol implementation backed by the Resend API.

    Example:
        >>> service = ResendEmailService(
        ...     base_url="https://api.resend.com",
        ...     api_key=settings.email_api_key,
        ...     sender="Passage <onboarding@resend.dev>",
        ...     logger=get_logger(),
        ... )
        >>> result = await service.send_email(message)
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        sender: str,
        logger: LoggerProtocol,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize Resend client settings.

        Args:
            base_url: API base URL (without trailing slash).
            api_key: Resend API key.
            sender: From address.
            logger: Structured logger.
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._sender = sender
        self._logger = logger
        self._timeout = timeout

    async def send_email(self, message: EmailMessage) -> Result[str, str]:
        payload = {
            "from": self._sender,
            "to": [message.to],
            "subject": message.subject,
            "text": message.text,
            "html": message.html,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{self._base_url}/emails",
                    json=payload,
                    headers=headers,
                )
        except httpx.TimeoutException as e:
            self._logger.warning("email_api_timeout", error=str(e))
            return Failure(error="Email API request timed out")
        except httpx.RequestError as e:
            self._logger.warning("email_api_connection_error", error=str(e))
            return Failure(error=f"Failed to connect to email API: {e}")

        if response.is_error:
            self._logger.warning(
                "email_api_error",
                status_code=response.status_code,
                body=response.text[:500],
            )
            return Failure(error=f"Email API returned {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            body = None
        email_id = body.get("id") if isinstance(body, dict) else None
        if not email_id:
            self._logger.warning("email_api_missing_id", body=response.text[:500])
            return Failure(error="Email API response did not include a message id")

        self._logger.info("email_sent", email_id=email_id, subject=message.subject)
        return Success(value=str(email_id))
