"""Update invitation status use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from assess.application.usecase.base import BaseUseCase
from assess.application.usecase.invitation.item import InvitationItem
from assess.domain.service import InvitationService
from assess.domain.value import InvitationId, InvitationStatus


class UpdateInvitationStatusRequest(BaseModel):
    """Administrative status overwrite."""

    invitation_id: UUID
    status: InvitationStatus


class UpdateInvitationStatusResponse(BaseModel):
    """Updated invitation."""

    invitation: InvitationItem


class UpdateInvitationStatusUseCase(BaseUseCase):
    """Overwrite an invitation's status outside the acceptance flow."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: UpdateInvitationStatusRequest
    ) -> UpdateInvitationStatusResponse:
        with logfire.span(
            "update_invitation_status.execute",
            invitation_id=str(request.invitation_id),
        ):
            invitation = await self.invitation_service.update_invitation_status(
                InvitationId(request.invitation_id), request.status
            )
            return UpdateInvitationStatusResponse(
                invitation=InvitationItem.from_invitation(invitation)
            )
