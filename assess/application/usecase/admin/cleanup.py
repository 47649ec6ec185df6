"""Cleanup use case."""

import logfire
from pydantic import BaseModel

from assess.application.usecase.base import BaseUseCase
from assess.domain.service import InvitationService, MagicLinkAuthenticator


class CleanupRequest(BaseModel):
    """Cleanup request; no parameters."""


class CleanupResponse(BaseModel):
    """Counts of rows touched by the sweeps."""

    magic_links_deleted: int
    invitations_expired: int


class CleanupUseCase(BaseUseCase):
    """Delete expired magic links and expire stale invitations."""

    def __init__(
        self,
        authenticator: MagicLinkAuthenticator,
        invitation_service: InvitationService,
    ) -> None:
        self.authenticator = authenticator
        self.invitation_service = invitation_service

    async def execute(self, request: CleanupRequest) -> CleanupResponse:
        with logfire.span("cleanup.execute"):
            deleted = await self.authenticator.cleanup_expired_tokens()
            expired = await self.invitation_service.expire_stale_invitations()
            return CleanupResponse(
                magic_links_deleted=deleted, invitations_expired=expired
            )
