"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from assess.domain.model import Invitation
from assess.domain.repository.invitation import InvitationRepository
from assess.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    PeriodId,
    TemplateId,
    UserId,
)
from assess.persistence.repository.inmemory.database import InMemoryTables


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, tables: InMemoryTables) -> None:
        self._invitations = tables.invitations

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def find_by_manager(self, manager_id: UserId) -> list[Invitation]:
        """Find invitations sent by a manager, oldest first."""
        return sorted(
            (i for i in self._invitations.values() if i.manager_id == manager_id),
            key=lambda i: i.invited_at,
        )

    async def find_by_email(self, email: str) -> list[Invitation]:
        """Find invitations addressed to an email, oldest first."""
        return sorted(
            (i for i in self._invitations.values() if i.email == email),
            key=lambda i: i.invited_at,
        )

    async def exists_for(
        self,
        manager_id: UserId,
        template_id: TemplateId,
        period_id: PeriodId,
        email: str,
    ) -> bool:
        """Check whether the manager already invited this email."""
        return any(
            i.manager_id == manager_id
            and i.template_id == template_id
            and i.period_id == period_id
            and i.email == email
            for i in self._invitations.values()
        )

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If the token or target combination is taken by
                another invitation
        """
        for other in self._invitations.values():
            if other.id == invitation.id:
                continue
            if other.token == invitation.token or (
                other.manager_id == invitation.manager_id
                and other.template_id == invitation.template_id
                and other.period_id == invitation.period_id
                and other.email == invitation.email
            ):
                raise IntegrityError("Duplicate invitation", None, Exception())

        self._invitations[invitation.id] = invitation
        return invitation

    async def claim_for_acceptance(
        self, invitation_id: InvitationId, now: datetime
    ) -> bool:
        """Move a pending, unexpired invitation to accepted."""
        invitation = self._invitations.get(invitation_id)
        if (
            invitation is None
            or invitation.status != InvitationStatus.PENDING
            or invitation.expires_at < now
        ):
            return False
        self._invitations[invitation_id] = invitation.model_copy(
            update={"status": InvitationStatus.ACCEPTED, "accepted_at": now}
        )
        return True

    async def mark_declined(self, invitation_id: InvitationId) -> bool:
        """Move a pending invitation to declined."""
        invitation = self._invitations.get(invitation_id)
        if invitation is None or invitation.status != InvitationStatus.PENDING:
            return False
        self._invitations[invitation_id] = invitation.model_copy(
            update={"status": InvitationStatus.DECLINED}
        )
        return True

    async def record_reminder(self, invitation_id: InvitationId, now: datetime) -> bool:
        """Increment the reminder counter of a pending, unexpired invitation."""
        invitation = self._invitations.get(invitation_id)
        if invitation is None or not invitation.is_acceptable(now):
            return False
        self._invitations[invitation_id] = invitation.model_copy(
            update={
                "reminder_count": invitation.reminder_count + 1,
                "last_reminder_sent": now,
            }
        )
        return True

    async def expire_pending(self, now: datetime) -> int:
        """Mark pending invitations past expiry as expired."""
        count = 0
        for invitation_id, invitation in list(self._invitations.items()):
            if (
                invitation.status == InvitationStatus.PENDING
                and invitation.expires_at < now
            ):
                self._invitations[invitation_id] = invitation.model_copy(
                    update={"status": InvitationStatus.EXPIRED}
                )
                count += 1
        return count

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation by ID."""
        return self._invitations.pop(invitation_id, None) is not None
