"""Auth use cases."""

from assess.application.usecase.auth.request_magic_link import (
    RequestMagicLinkRequest,
    RequestMagicLinkResponse,
    RequestMagicLinkUseCase,
)
from assess.application.usecase.auth.verify_magic_link import (
    AuthenticatedUserItem,
    VerifyMagicLinkRequest,
    VerifyMagicLinkResponse,
    VerifyMagicLinkUseCase,
)

__all__ = [
    "AuthenticatedUserItem",
    "RequestMagicLinkRequest",
    "RequestMagicLinkResponse",
    "RequestMagicLinkUseCase",
    "VerifyMagicLinkRequest",
    "VerifyMagicLinkResponse",
    "VerifyMagicLinkUseCase",
]
