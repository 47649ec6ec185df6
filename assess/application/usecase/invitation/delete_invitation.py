"""Delete invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from assess.application.usecase.base import BaseUseCase
from assess.domain.service import InvitationService
from assess.domain.value import InvitationId


class DeleteInvitationRequest(BaseModel):
    """Delete invitation request."""

    invitation_id: UUID


class DeleteInvitationUseCase(BaseUseCase):
    """Delete an invitation; missing invitations are ignored."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: DeleteInvitationRequest) -> None:
        with logfire.span(
            "delete_invitation.execute", invitation_id=str(request.invitation_id)
        ):
            await self.invitation_service.delete_invitation(
                InvitationId(request.invitation_id)
            )
