"""Get invitations use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, model_validator

from assess.application.usecase.base import BaseUseCase
from assess.application.usecase.invitation.item import InvitationItem
from assess.domain.service import InvitationService
from assess.domain.value import UserId


class GetInvitationsRequest(BaseModel):
    """List invitations by manager or by invitee email; exactly one filter."""

    manager_id: UUID | None = None
    email: str | None = None

    @model_validator(mode="after")
    def exactly_one_filter(self) -> "GetInvitationsRequest":
        if (self.manager_id is None) == (self.email is None):
            raise ValueError("Provide exactly one of manager_id or email")
        return self


class GetInvitationsResponse(BaseModel):
    """Invitations, oldest first."""

    invitations: list[InvitationItem]


class GetInvitationsUseCase(BaseUseCase):
    """List invitations for a manager or an invitee."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: GetInvitationsRequest) -> GetInvitationsResponse:
        with logfire.span("get_invitations.execute"):
            if request.manager_id is not None:
                invitations = await self.invitation_service.get_invitations_by_manager(
                    UserId(request.manager_id)
                )
            else:
                invitations = await self.invitation_service.get_invitations_by_email(
                    request.email or ""
                )
            return GetInvitationsResponse(
                invitations=[InvitationItem.from_invitation(i) for i in invitations]
            )
