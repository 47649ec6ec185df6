"""SQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from assess.domain.model import Invitation
from assess.domain.repository import InvitationRepository
from assess.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    PeriodId,
    TemplateId,
    UserId,
)
from assess.persistence.mappers import invitation_to_dict, row_to_invitation
from assess.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_manager(self, manager_id: UserId) -> list[Invitation]:
        """Find invitations sent by a manager, oldest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.manager_id == manager_id)
            .order_by(invitations_table.c.invited_at, invitations_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings()]

    async def find_by_email(self, email: str) -> list[Invitation]:
        """Find invitations addressed to an email, oldest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.email == email)
            .order_by(invitations_table.c.invited_at, invitations_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings()]

    async def exists_for(
        self,
        manager_id: UserId,
        template_id: TemplateId,
        period_id: PeriodId,
        email: str,
    ) -> bool:
        """Check whether the manager already invited this email.

        Fast check without loading full invitation data.
        """
        stmt = select(invitations_table.c.id).where(
            and_(
                invitations_table.c.manager_id == manager_id,
                invitations_table.c.template_id == template_id,
                invitations_table.c.period_id == period_id,
                invitations_table.c.email == email,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation
        """
        invitation_dict = invitation_to_dict(invitation)

        # Check if invitation exists
        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invitation

    async def claim_for_acceptance(
        self, invitation_id: InvitationId, now: datetime
    ) -> bool:
        """Move a pending, unexpired invitation to accepted.

        The WHERE clause re-checks status and expiry under the row lock, so
        of two concurrent acceptances exactly one matches.
        """
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.expires_at >= now,
                )
            )
            .values(status=InvitationStatus.ACCEPTED.value, accepted_at=now)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def mark_declined(self, invitation_id: InvitationId) -> bool:
        """Move a pending invitation to declined."""
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                )
            )
            .values(status=InvitationStatus.DECLINED.value)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def record_reminder(self, invitation_id: InvitationId, now: datetime) -> bool:
        """Increment the reminder counter of a pending, unexpired invitation.

        Only the reminder columns are written, so a concurrent acceptance
        is never overwritten by a stale copy of the row.
        """
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.expires_at >= now,
                )
            )
            .values(
                reminder_count=invitations_table.c.reminder_count + 1,
                last_reminder_sent=now,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def expire_pending(self, now: datetime) -> int:
        """Mark pending invitations past expiry as expired."""
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.expires_at < now,
                )
            )
            .values(status=InvitationStatus.EXPIRED.value)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation by ID."""
        stmt = delete(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
