"""Request magic link use case."""

import logfire
from pydantic import BaseModel, Field

from assess.application.usecase.base import BaseUseCase
from assess.application.usecase.messages import magic_link_message
from assess.config import Settings
from assess.domain.service import EmailSender, MagicLinkAuthenticator


class RequestMagicLinkRequest(BaseModel):
    """Request a login link for an email address."""

    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class RequestMagicLinkResponse(BaseModel):
    """Response that never reveals whether the address has an account."""

    message: str = "If the address can sign in, a login link has been sent"


class RequestMagicLinkUseCase(BaseUseCase):
    """Issue a magic link and email it to the requester."""

    def __init__(
        self,
        authenticator: MagicLinkAuthenticator,
        email_sender: EmailSender,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            authenticator: Magic link domain service
            email_sender: Outbound email
            settings: Application settings (link URL and lifetime)
        """
        self.authenticator = authenticator
        self.email_sender = email_sender
        self.settings = settings

    async def execute(
        self, request: RequestMagicLinkRequest
    ) -> RequestMagicLinkResponse:
        """Issue the token, then send the link.

        Raises:
            EmailDeliveryError: If the link could not be sent
        """
        with logfire.span("request_magic_link.execute"):
            token = await self.authenticator.issue(request.email)
            subject, body = magic_link_message(
                self.settings.magic_link_url(token.root),
                self.settings.auth.magic_link_ttl_hours,
            )
            await self.email_sender.send(request.email.strip(), subject, body)
            return RequestMagicLinkResponse()
