"""Decline invitation use case."""

import logfire
from pydantic import BaseModel

from assess.application.usecase.base import BaseUseCase
from assess.application.usecase.invitation.item import InvitationItem
from assess.domain.service import InvitationService


class DeclineInvitationRequest(BaseModel):
    """Token from the invitation link."""

    token: str


class DeclineInvitationResponse(BaseModel):
    """Declined invitation."""

    invitation: InvitationItem


class DeclineInvitationUseCase(BaseUseCase):
    """Invitee turns down an invitation."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: DeclineInvitationRequest
    ) -> DeclineInvitationResponse:
        with logfire.span("decline_invitation.execute"):
            invitation = await self.invitation_service.decline_invitation(request.token)
            return DeclineInvitationResponse(
                invitation=InvitationItem.from_invitation(invitation)
            )
