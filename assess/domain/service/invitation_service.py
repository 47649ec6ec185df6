"""Invitation domain service."""

from datetime import date, datetime, timedelta
from typing import Callable
from uuid import uuid4

import logfire
from pydantic import ValidationError

from assess.config import InvitationSettings
from assess.domain.error import BusinessRuleViolationError, NotFoundError
from assess.domain.model import Invitation
from assess.domain.model.common import utc_now
from assess.domain.repository import UnitOfWork
from assess.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    PeriodId,
    TemplateId,
    UserId,
    normalize_email,
)

from .base import Service


class InvitationService(Service):
    """Domain service for invitation lifecycle operations other than acceptance."""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        invitation_settings: InvitationSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize invitation service.

        Args:
            unit_of_work: Transaction factory
            invitation_settings: Invitation expiry settings
            clock: Source of the current time
        """
        self.unit_of_work = unit_of_work
        self.invitation_settings = invitation_settings
        self.clock = clock

    async def create_invitation(
        self,
        manager_id: UserId,
        template_id: TemplateId,
        period_id: PeriodId,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        due_date: date | None = None,
    ) -> Invitation:
        """Create a pending invitation.

        Args:
            manager_id: Inviting manager
            template_id: Assessment template to complete
            period_id: Assessment period
            email: Invitee address
            first_name: Optional invitee first name
            last_name: Optional invitee last name
            due_date: Optional due date copied to the assessment instance

        Returns:
            Created invitation

        Raises:
            NotFoundError: If the manager does not exist
            BusinessRuleViolationError: If the manager already invited this
                email for the same template and period
        """
        email = normalize_email(email)

        with logfire.span(
            "invitation_service.create_invitation",
            manager_id=str(manager_id),
            template_id=template_id,
            period_id=period_id,
        ):
            now = self.clock()
            async with self.unit_of_work.transaction() as tx:
                if await tx.users.find_by_id(manager_id) is None:
                    logfire.warn("Manager not found", manager_id=str(manager_id))
                    raise NotFoundError("User", str(manager_id))

                if await tx.invitations.exists_for(
                    manager_id, template_id, period_id, email
                ):
                    logfire.warn(
                        "Invitation already exists",
                        manager_id=str(manager_id),
                        template_id=template_id,
                        period_id=period_id,
                    )
                    raise BusinessRuleViolationError(
                        "Invitation already sent to this email for this "
                        "template and period"
                    )

                invitation = Invitation(
                    id=InvitationId(uuid4()),
                    manager_id=manager_id,
                    template_id=template_id,
                    period_id=period_id,
                    email=email,
                    first_name=first_name,
                    last_name=last_name,
                    status=InvitationStatus.PENDING,
                    token=InvitationToken.generate(),
                    invited_at=now,
                    expires_at=now
                    + timedelta(days=self.invitation_settings.expiry_days),
                    due_date=due_date,
                )
                saved = await tx.invitations.save(invitation)

            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                manager_id=str(manager_id),
                token=saved.token.preview,
            )
            return saved

    async def get_invitation(self, invitation_id: InvitationId) -> Invitation | None:
        """Get invitation by ID."""
        async with self.unit_of_work.transaction() as tx:
            return await tx.invitations.find_by_id(invitation_id)

    async def get_invitation_by_token(self, token: str) -> Invitation | None:
        """Get invitation by token.

        Args:
            token: Raw token from the invitation link

        Returns:
            Invitation if found, None if unknown or malformed
        """
        try:
            parsed = InvitationToken(token)
        except ValidationError:
            logfire.info("Invitation token malformed")
            return None

        with logfire.span(
            "invitation_service.get_invitation_by_token", token=parsed.preview
        ):
            async with self.unit_of_work.transaction() as tx:
                invitation = await tx.invitations.find_by_token(parsed)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
            else:
                logfire.warn("Invitation not found", token=parsed.preview)
            return invitation

    async def get_invitations_by_manager(self, manager_id: UserId) -> list[Invitation]:
        """Get all invitations sent by a manager, oldest first."""
        with logfire.span(
            "invitation_service.get_invitations_by_manager", manager_id=str(manager_id)
        ):
            async with self.unit_of_work.transaction() as tx:
                return await tx.invitations.find_by_manager(manager_id)

    async def get_invitations_by_email(self, email: str) -> list[Invitation]:
        """Get all invitations addressed to an email, oldest first."""
        with logfire.span("invitation_service.get_invitations_by_email"):
            async with self.unit_of_work.transaction() as tx:
                return await tx.invitations.find_by_email(normalize_email(email))

    async def update_invitation_status(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> Invitation:
        """Overwrite an invitation's status.

        Administrative path; bypasses the acceptance flow but keeps
        accepted_at set exactly when the status is ACCEPTED.

        Args:
            invitation_id: Invitation to update
            status: New status

        Returns:
            Updated invitation

        Raises:
            NotFoundError: If the invitation does not exist
        """
        with logfire.span(
            "invitation_service.update_invitation_status",
            invitation_id=str(invitation_id),
            status=status.value,
        ):
            async with self.unit_of_work.transaction() as tx:
                invitation = await tx.invitations.find_by_id(invitation_id)
                if invitation is None:
                    logfire.warn(
                        "Invitation not found", invitation_id=str(invitation_id)
                    )
                    raise NotFoundError("Invitation", str(invitation_id))

                if status == InvitationStatus.ACCEPTED:
                    accepted_at = invitation.accepted_at or self.clock()
                else:
                    accepted_at = None

                updated = await tx.invitations.save(
                    invitation.model_copy(
                        update={"status": status, "accepted_at": accepted_at}
                    )
                )

            logfire.info(
                "Invitation status updated",
                invitation_id=str(invitation_id),
                previous=invitation.status.value,
                status=status.value,
            )
            return updated

    async def delete_invitation(self, invitation_id: InvitationId) -> None:
        """Delete an invitation. Deleting a missing invitation is a no-op."""
        with logfire.span(
            "invitation_service.delete_invitation", invitation_id=str(invitation_id)
        ):
            async with self.unit_of_work.transaction() as tx:
                deleted = await tx.invitations.delete(invitation_id)
            logfire.info(
                "Invitation deleted", invitation_id=str(invitation_id), deleted=deleted
            )

    async def decline_invitation(self, token: str) -> Invitation:
        """Decline a pending invitation.

        Args:
            token: Raw token from the invitation link

        Returns:
            Declined invitation

        Raises:
            NotFoundError: If no invitation has this token
            BusinessRuleViolationError: If the invitation is not pending
        """
        try:
            parsed = InvitationToken(token)
        except ValidationError:
            raise NotFoundError("Invitation", "malformed token") from None

        with logfire.span(
            "invitation_service.decline_invitation", token=parsed.preview
        ):
            async with self.unit_of_work.transaction() as tx:
                invitation = await tx.invitations.find_by_token(parsed)
                if invitation is None:
                    raise NotFoundError("Invitation", parsed.preview)

                if not await tx.invitations.mark_declined(invitation.id):
                    logfire.warn(
                        "Invitation not pending",
                        invitation_id=str(invitation.id),
                        status=invitation.status.value,
                    )
                    raise BusinessRuleViolationError(
                        f"Invitation is {invitation.status.value}, not pending"
                    )

            logfire.info("Invitation declined", invitation_id=str(invitation.id))
            return invitation.model_copy(update={"status": InvitationStatus.DECLINED})

    async def record_reminder(self, invitation_id: InvitationId) -> Invitation:
        """Record that a reminder was sent for a pending invitation.

        Raises:
            NotFoundError: If the invitation does not exist
            BusinessRuleViolationError: If the invitation is not pending or
                has expired
        """
        with logfire.span(
            "invitation_service.record_reminder", invitation_id=str(invitation_id)
        ):
            now = self.clock()
            async with self.unit_of_work.transaction() as tx:
                invitation = await tx.invitations.find_by_id(invitation_id)
                if invitation is None:
                    raise NotFoundError("Invitation", str(invitation_id))

                if invitation.is_expired(now):
                    raise BusinessRuleViolationError("Invitation has expired")

                # Conditional write: the row may have left pending since the read
                if not await tx.invitations.record_reminder(invitation.id, now):
                    current = await tx.invitations.find_by_id(invitation_id)
                    status = current.status if current else invitation.status
                    logfire.warn(
                        "Invitation not pending",
                        invitation_id=str(invitation_id),
                        status=status.value,
                    )
                    raise BusinessRuleViolationError(
                        f"Invitation is {status.value}, not pending"
                    )

                updated = await tx.invitations.find_by_id(invitation_id)

            logfire.info(
                "Invitation reminder recorded",
                invitation_id=str(invitation_id),
                reminder_count=updated.reminder_count,
            )
            return updated

    async def expire_stale_invitations(self) -> int:
        """Mark pending invitations past their expiry as expired.

        Returns:
            Number of invitations expired
        """
        with logfire.span("invitation_service.expire_stale_invitations"):
            async with self.unit_of_work.transaction() as tx:
                expired = await tx.invitations.expire_pending(self.clock())
            logfire.info("Stale invitations expired", count=expired)
            return expired
