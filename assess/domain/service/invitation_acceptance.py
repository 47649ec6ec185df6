"""Invitation acceptance domain service.

Accepting an invitation provisions three rows at once: the invitee's user
account, their assessment instance for the invitation's period/template, and
the manager relationship. Either all of them exist afterwards together with
the invitation marked accepted, or none of them do.
"""

from datetime import datetime
from enum import Enum
from typing import Callable
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel, SecretStr
from sqlalchemy.exc import IntegrityError

from assess.domain.model import AssessmentInstance, ManagerRelationship, User
from assess.domain.model.common import utc_now
from assess.domain.repository import UnitOfWork
from assess.domain.value import (
    AssessmentInstanceId,
    AssessmentInstanceStatus,
    InvitationId,
    ManagerRelationshipId,
    UserId,
    UserRole,
    normalize_email,
)

from .base import Service


class AcceptanceFailureReason(str, Enum):
    """Why an acceptance was refused."""

    NOT_FOUND = "invitation not found"
    ALREADY_USED_OR_EXPIRED = "invitation already used or expired"
    EMAIL_MISMATCH = "email mismatch"
    USER_EXISTS = "user already exists"


class InvitationAcceptance(BaseModel):
    """Details the invitee submits when accepting."""

    email: str
    first_name: str
    last_name: str
    # Handed to the credential store, never persisted here
    password: SecretStr


class AcceptanceSucceeded(BaseModel):
    """Rows provisioned by a successful acceptance."""

    user_id: UserId
    assessment_instance_id: AssessmentInstanceId


class AcceptanceFailed(BaseModel):
    """Acceptance refused; nothing was written."""

    reason: AcceptanceFailureReason


AcceptanceResult = AcceptanceSucceeded | AcceptanceFailed


class _InvitationClaimLost(Exception):
    """Raised inside the transaction when the conditional claim matched no row."""


class _UserEmailTaken(Exception):
    """Raised inside the transaction when a concurrent acceptance created the user."""


class InvitationAcceptanceCoordinator(Service):
    """Domain service that turns a pending invitation into a provisioned user."""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize coordinator.

        Args:
            unit_of_work: Transaction factory
            clock: Source of the current time
        """
        self.unit_of_work = unit_of_work
        self.clock = clock

    async def accept_invitation(
        self,
        invitation_id: InvitationId | UUID | str,
        acceptance: InvitationAcceptance,
    ) -> AcceptanceResult:
        """Accept an invitation on behalf of the invitee.

        Expected refusals come back as AcceptanceFailed. Storage errors
        propagate after the transaction has rolled back.

        Args:
            invitation_id: Invitation to accept; malformed ids are treated
                as unknown
            acceptance: Invitee details

        Returns:
            AcceptanceSucceeded with the new user and assessment instance
            ids, or AcceptanceFailed with the reason
        """
        parsed_id = _parse_invitation_id(invitation_id)
        if parsed_id is None:
            logfire.warn("Invitation id malformed")
            return AcceptanceFailed(reason=AcceptanceFailureReason.NOT_FOUND)

        with logfire.span(
            "invitation_acceptance.accept_invitation", invitation_id=str(parsed_id)
        ):
            try:
                result = await self._accept(parsed_id, acceptance)
            except _InvitationClaimLost:
                logfire.warn(
                    "Invitation claimed concurrently", invitation_id=str(parsed_id)
                )
                return AcceptanceFailed(
                    reason=AcceptanceFailureReason.ALREADY_USED_OR_EXPIRED
                )
            except _UserEmailTaken:
                logfire.warn("User created concurrently", invitation_id=str(parsed_id))
                return AcceptanceFailed(reason=AcceptanceFailureReason.USER_EXISTS)

            if isinstance(result, AcceptanceFailed):
                logfire.warn(
                    "Invitation acceptance refused",
                    invitation_id=str(parsed_id),
                    reason=result.reason.value,
                )
            else:
                logfire.info(
                    "Invitation accepted",
                    invitation_id=str(parsed_id),
                    user_id=str(result.user_id),
                    assessment_instance_id=str(result.assessment_instance_id),
                )
            return result

    async def _accept(
        self, invitation_id: InvitationId, acceptance: InvitationAcceptance
    ) -> AcceptanceResult:
        now = self.clock()
        email = normalize_email(acceptance.email)

        async with self.unit_of_work.transaction() as tx:
            invitation = await tx.invitations.find_by_id(invitation_id)
            if invitation is None:
                return AcceptanceFailed(reason=AcceptanceFailureReason.NOT_FOUND)

            if not invitation.is_acceptable(now):
                return AcceptanceFailed(
                    reason=AcceptanceFailureReason.ALREADY_USED_OR_EXPIRED
                )

            if normalize_email(invitation.email) != email:
                return AcceptanceFailed(reason=AcceptanceFailureReason.EMAIL_MISMATCH)

            if await tx.users.find_by_email(email) is not None:
                return AcceptanceFailed(reason=AcceptanceFailureReason.USER_EXISTS)

            # Claim first: a concurrent acceptance blocks on the row and then
            # matches nothing, instead of racing on the user insert
            if not await tx.invitations.claim_for_acceptance(invitation.id, now):
                raise _InvitationClaimLost()

            try:
                user = await tx.users.save(
                    User(
                        id=UserId(uuid4()),
                        email=email,
                        first_name=acceptance.first_name,
                        last_name=acceptance.last_name,
                        role=UserRole.USER,
                        is_active=True,
                        created_at=now,
                    )
                )
            except IntegrityError as e:
                # Another invitation for this email was accepted after our check
                raise _UserEmailTaken() from e

            instance = await tx.assessment_instances.save(
                AssessmentInstance(
                    id=AssessmentInstanceId(uuid4()),
                    user_id=user.id,
                    period_id=invitation.period_id,
                    template_id=invitation.template_id,
                    status=AssessmentInstanceStatus.PENDING,
                    due_date=invitation.due_date,
                    created_at=now,
                )
            )

            await tx.manager_relationships.save(
                ManagerRelationship(
                    id=ManagerRelationshipId(uuid4()),
                    manager_id=invitation.manager_id,
                    subordinate_id=user.id,
                    period_id=invitation.period_id,
                    created_at=now,
                )
            )

        return AcceptanceSucceeded(user_id=user.id, assessment_instance_id=instance.id)


def _parse_invitation_id(value: InvitationId | UUID | str) -> InvitationId | None:
    if isinstance(value, UUID):
        return InvitationId(value)
    try:
        return InvitationId(UUID(str(value)))
    except ValueError:
        return None
