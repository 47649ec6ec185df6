"""Errors raised by outbound adapters such as the email provider."""


class AdapterError(Exception):
    """Base error for outbound adapters."""

    pass


class ProviderError(AdapterError):
    """The email provider rejected a request or could not be reached."""

    pass
