"""HTTP mail API client.

Posts plain text messages to a SendGrid v3 compatible endpoint.
"""

from dataclasses import dataclass

import httpx
import logfire

from assess.adapter.error import ProviderError
from assess.config import EmailSettings
from assess.domain.service.email import EmailSender


class EmailDeliveryError(ProviderError):
    """Mail API rejected the message or could not be reached."""

    pass


class HttpEmailSender(EmailSender):
    """EmailSender that calls an HTTP mail API with httpx."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize sender.

        Args:
            settings: Endpoint, credentials and sender identity
        """
        self.settings = settings

    def _payload(self, to: str, subject: str, body: str) -> dict:
        return {
            "personalizations": [{"to": [{"email": to}]}],
            "from": {
                "email": self.settings.from_address,
                "name": self.settings.from_name,
            },
            "subject": subject,
            "content": [{"type": "text/plain", "value": body}],
        }

    async def send(self, to: str, subject: str, body: str) -> None:
        """Send a plain text email.

        Raises:
            EmailDeliveryError: If no API key is configured, the request
                fails, or the API answers with a non-2xx status
        """
        if not self.settings.api_key:
            logfire.error("Email API key not configured")
            raise EmailDeliveryError("Email API key not configured")

        with logfire.span("email.send", subject=subject):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        self.settings.api_url,
                        json=self._payload(to, subject, body),
                        headers={"Authorization": f"Bearer {self.settings.api_key}"},
                        timeout=self.settings.timeout_seconds,
                    )
            except httpx.HTTPError as e:
                logfire.error("Email API HTTP error", error=str(e))
                raise EmailDeliveryError(f"HTTP error sending email: {e}") from e

            if response.status_code >= 300:
                logfire.error(
                    "Email API rejected message",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise EmailDeliveryError(
                    f"Email API returned {response.status_code}"
                )

            logfire.info("Email sent", status_code=response.status_code)


@dataclass(frozen=True)
class SentEmail:
    """Message captured by MockEmailSender."""

    to: str
    subject: str
    body: str


class MockEmailSender(EmailSender):
    """Mock sender for testing.

    Records messages instead of delivering them.
    """

    def __init__(self) -> None:
        self.sent: list[SentEmail] = []

    async def send(self, to: str, subject: str, body: str) -> None:
        """Record the message."""
        self.sent.append(SentEmail(to=to, subject=subject, body=body))

    def sent_to(self, to: str) -> list[SentEmail]:
        """Messages recorded for one recipient."""
        return [message for message in self.sent if message.to == to]
