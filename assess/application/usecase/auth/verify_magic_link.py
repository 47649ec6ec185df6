"""Verify magic link use case."""

import logfire
from pydantic import BaseModel

from assess.application.usecase.base import BaseUseCase
from assess.domain.service import MagicLinkAuthenticator
from assess.domain.value import UserId, UserRole


class VerifyMagicLinkRequest(BaseModel):
    """Token taken from the login link."""

    token: str


class AuthenticatedUserItem(BaseModel):
    """User resolved from a verified link."""

    id: UserId
    email: str
    first_name: str | None
    last_name: str | None
    role: UserRole


class VerifyMagicLinkResponse(BaseModel):
    """Verification outcome."""

    authenticated: bool
    user: AuthenticatedUserItem | None = None


class VerifyMagicLinkUseCase(BaseUseCase):
    """Consume a magic link and return the user it belongs to."""

    def __init__(self, authenticator: MagicLinkAuthenticator) -> None:
        self.authenticator = authenticator

    async def execute(self, request: VerifyMagicLinkRequest) -> VerifyMagicLinkResponse:
        with logfire.span("verify_magic_link.execute"):
            user = await self.authenticator.verify(request.token)
            if user is None:
                return VerifyMagicLinkResponse(authenticated=False)
            return VerifyMagicLinkResponse(
                authenticated=True,
                user=AuthenticatedUserItem(**user.model_dump()),
            )
