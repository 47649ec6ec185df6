"""Invitation representation shared by invitation use cases."""

from datetime import date, datetime

from pydantic import BaseModel

from assess.domain.model import Invitation
from assess.domain.value import InvitationId, InvitationStatus, UserId


class InvitationItem(BaseModel):
    """Invitation as returned to API clients.

    The token is deliberately absent; it only travels inside emailed links.
    """

    id: InvitationId
    manager_id: UserId
    template_id: int
    period_id: int
    email: str
    first_name: str | None
    last_name: str | None
    status: InvitationStatus
    invited_at: datetime
    accepted_at: datetime | None
    expires_at: datetime
    reminder_count: int
    last_reminder_sent: datetime | None
    due_date: date | None

    @classmethod
    def from_invitation(cls, invitation: Invitation) -> "InvitationItem":
        return cls(**invitation.model_dump(exclude={"token"}))
