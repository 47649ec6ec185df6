"""Outbound email providers."""

from dishka import Scope, provide

from assess.adapter.email import HttpEmailSender
from assess.config import EmailSettings
from assess.domain.service import EmailSender
from assess.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider posting to the HTTP mail API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide HTTP email sender."""
        return HttpEmailSender(settings=email_settings)
