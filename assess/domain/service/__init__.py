"""Domain services."""

from .base import Service
from .email import EmailSender
from .invitation_acceptance import (
    AcceptanceFailed,
    AcceptanceFailureReason,
    AcceptanceResult,
    AcceptanceSucceeded,
    InvitationAcceptance,
    InvitationAcceptanceCoordinator,
)
from .invitation_service import InvitationService
from .magic_link_authenticator import MagicLinkAuthenticator
from .user_service import UserService

__all__ = [
    "AcceptanceFailed",
    "AcceptanceFailureReason",
    "AcceptanceResult",
    "AcceptanceSucceeded",
    "EmailSender",
    "InvitationAcceptance",
    "InvitationAcceptanceCoordinator",
    "InvitationService",
    "MagicLinkAuthenticator",
    "Service",
    "UserService",
]
