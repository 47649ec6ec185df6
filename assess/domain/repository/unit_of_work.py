"""Unit of work interface.

Services that must read and write several entities atomically open a
transaction and go through the repositories it exposes. Leaving the block
normally commits; an exception rolls every write back and propagates.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from assess.domain.repository.assessment_instance import AssessmentInstanceRepository
from assess.domain.repository.invitation import InvitationRepository
from assess.domain.repository.magic_link import MagicLinkRepository
from assess.domain.repository.manager_relationship import (
    ManagerRelationshipRepository,
)
from assess.domain.repository.user import UserRepository


@dataclass(frozen=True)
class Transaction:
    """Repositories bound to a single open transaction."""

    users: UserRepository
    magic_links: MagicLinkRepository
    invitations: InvitationRepository
    assessment_instances: AssessmentInstanceRepository
    manager_relationships: ManagerRelationshipRepository


class UnitOfWork(ABC):
    """Factory for transactions.

    Usage:
        async with unit_of_work.transaction() as tx:
            invitation = await tx.invitations.find_by_id(invitation_id)
            ...
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[Transaction]:
        """Open a transaction.

        Returns:
            Async context manager yielding a Transaction
        """
        pass
