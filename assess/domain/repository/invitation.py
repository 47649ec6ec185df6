"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from assess.domain.model.invitation import Invitation
from assess.domain.value import (
    InvitationId,
    InvitationToken,
    PeriodId,
    TemplateId,
    UserId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token.

        Used when an invitee opens the invitation link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_manager(self, manager_id: UserId) -> list[Invitation]:
        """Find all invitations sent by a manager, oldest first."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> list[Invitation]:
        """Find all invitations addressed to an email, oldest first."""
        pass

    @abstractmethod
    async def exists_for(
        self,
        manager_id: UserId,
        template_id: TemplateId,
        period_id: PeriodId,
        email: str,
    ) -> bool:
        """Check whether the manager already invited this email.

        Args:
            manager_id: Inviting manager
            template_id: Assessment template
            period_id: Assessment period
            email: Lowercased invitee email

        Returns:
            True if a matching invitation exists in any status
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation

        Raises:
            IntegrityError: If the token or the manager/template/period/email
                combination is already taken
        """
        pass

    @abstractmethod
    async def claim_for_acceptance(
        self, invitation_id: InvitationId, now: datetime
    ) -> bool:
        """Move a pending, unexpired invitation to accepted.

        Args:
            invitation_id: The invitation to claim
            now: Current time, stored as accepted_at

        Returns:
            True if this call made the transition, False otherwise
        """
        pass

    @abstractmethod
    async def mark_declined(self, invitation_id: InvitationId) -> bool:
        """Move a pending invitation to declined.

        Returns:
            True if this call made the transition, False otherwise
        """
        pass

    @abstractmethod
    async def record_reminder(self, invitation_id: InvitationId, now: datetime) -> bool:
        """Count a reminder on a pending, unexpired invitation.

        Args:
            invitation_id: The invitation being reminded
            now: Current time, stored as last_reminder_sent

        Returns:
            True if the invitation was still acceptable and got updated
        """
        pass

    @abstractmethod
    async def expire_pending(self, now: datetime) -> int:
        """Mark every pending invitation past its expiry as expired.

        Returns:
            Number of invitations updated
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation.

        Returns:
            True if a row was removed
        """
        pass
