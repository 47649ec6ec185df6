"""Outbound email adapters."""

from .sender import (
    EmailDeliveryError,
    HttpEmailSender,
    MockEmailSender,
    SentEmail,
)

__all__ = [
    "EmailDeliveryError",
    "HttpEmailSender",
    "MockEmailSender",
    "SentEmail",
]
