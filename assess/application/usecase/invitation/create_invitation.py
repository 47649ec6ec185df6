"""Create invitation use case."""

from datetime import date
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from assess.application.usecase.base import BaseUseCase
from assess.application.usecase.invitation.item import InvitationItem
from assess.application.usecase.messages import invitation_message
from assess.config import Settings
from assess.domain.service import EmailSender, InvitationService
from assess.domain.value import PeriodId, TemplateId, UserId


class CreateInvitationRequest(BaseModel):
    """Request to invite someone to an assessment."""

    manager_id: UUID
    template_id: int
    period_id: int
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    due_date: date | None = None


class CreateInvitationResponse(BaseModel):
    """Created invitation and the link that was emailed."""

    invitation: InvitationItem
    invitation_url: str


class CreateInvitationUseCase(BaseUseCase):
    """Create an invitation and email the invitee."""

    def __init__(
        self,
        invitation_service: InvitationService,
        email_sender: EmailSender,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            email_sender: Outbound email
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.email_sender = email_sender
        self.settings = settings

    async def execute(self, request: CreateInvitationRequest) -> CreateInvitationResponse:
        """Create the invitation, then send it.

        Raises:
            NotFoundError: If the manager does not exist
            BusinessRuleViolationError: If this invitation already exists
            EmailDeliveryError: If the invitation email could not be sent
        """
        with logfire.span(
            "create_invitation.execute", manager_id=str(request.manager_id)
        ):
            invitation = await self.invitation_service.create_invitation(
                manager_id=UserId(request.manager_id),
                template_id=TemplateId(request.template_id),
                period_id=PeriodId(request.period_id),
                email=request.email,
                first_name=request.first_name,
                last_name=request.last_name,
                due_date=request.due_date,
            )

            url = self.settings.invitation_url(invitation.token.root)
            subject, body = invitation_message(invitation, url)
            await self.email_sender.send(invitation.email, subject, body)

            return CreateInvitationResponse(
                invitation=InvitationItem.from_invitation(invitation),
                invitation_url=url,
            )
