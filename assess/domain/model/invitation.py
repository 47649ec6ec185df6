"""Invitation entity.

Managers invite a subordinate to complete an assessment template for a
period. Accepting the invitation provisions the subordinate's account.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from assess.domain.model.common import DomainModel, utc_now
from assess.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    PeriodId,
    TemplateId,
    UserId,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Status moves PENDING -> ACCEPTED exactly once through acceptance
    - accepted_at is set iff status is ACCEPTED
    - One invitation per manager/template/period/email combination
    - Email is stored lowercase
    """

    id: InvitationId
    manager_id: UserId
    template_id: TemplateId
    period_id: PeriodId
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    status: InvitationStatus = InvitationStatus.PENDING
    token: InvitationToken
    invited_at: datetime = Field(default_factory=utc_now)
    accepted_at: Optional[datetime] = None
    expires_at: datetime
    reminder_count: int = Field(default=0, ge=0)
    last_reminder_sent: Optional[datetime] = None
    due_date: Optional[date] = None

    def is_expired(self, now: datetime) -> bool:
        """Check if the invitation has expired at the given instant."""
        return now > self.expires_at

    def is_acceptable(self, now: datetime) -> bool:
        """Check if the invitation is pending and not yet expired."""
        return self.status == InvitationStatus.PENDING and not self.is_expired(now)
