"""Send invitation reminder use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from assess.application.usecase.base import BaseUseCase
from assess.application.usecase.invitation.item import InvitationItem
from assess.application.usecase.messages import reminder_message
from assess.config import Settings
from assess.domain.service import EmailSender, InvitationService
from assess.domain.value import InvitationId


class SendReminderRequest(BaseModel):
    """Send reminder request."""

    invitation_id: UUID


class SendReminderResponse(BaseModel):
    """Invitation with the updated reminder counters."""

    invitation: InvitationItem


class SendReminderUseCase(BaseUseCase):
    """Record a reminder on a pending invitation and email the invitee."""

    def __init__(
        self,
        invitation_service: InvitationService,
        email_sender: EmailSender,
        settings: Settings,
    ) -> None:
        self.invitation_service = invitation_service
        self.email_sender = email_sender
        self.settings = settings

    async def execute(self, request: SendReminderRequest) -> SendReminderResponse:
        """Record the reminder, then send it.

        Raises:
            NotFoundError: If the invitation does not exist
            BusinessRuleViolationError: If the invitation is no longer pending
            EmailDeliveryError: If the reminder could not be sent
        """
        with logfire.span(
            "send_reminder.execute", invitation_id=str(request.invitation_id)
        ):
            invitation = await self.invitation_service.record_reminder(
                InvitationId(request.invitation_id)
            )
            url = self.settings.invitation_url(invitation.token.root)
            subject, body = reminder_message(invitation, url)
            await self.email_sender.send(invitation.email, subject, body)
            return SendReminderResponse(
                invitation=InvitationItem.from_invitation(invitation)
            )
