"""In-memory unit of work for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from assess.domain.repository import Transaction, UnitOfWork
from assess.persistence.repository.inmemory.assessment_instance import (
    InMemoryAssessmentInstanceRepository,
)
from assess.persistence.repository.inmemory.database import InMemoryDatabase
from assess.persistence.repository.inmemory.invitation import (
    InMemoryInvitationRepository,
)
from assess.persistence.repository.inmemory.magic_link import (
    InMemoryMagicLinkRepository,
)
from assess.persistence.repository.inmemory.manager_relationship import (
    InMemoryManagerRelationshipRepository,
)
from assess.persistence.repository.inmemory.user import InMemoryUserRepository


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work over an InMemoryDatabase."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """Run the block against a private copy of the tables.

        The copy is published on normal exit and discarded on exception.
        """
        async with self.database.lock:
            working = self.database.tables.copy()
            yield Transaction(
                users=InMemoryUserRepository(working),
                magic_links=InMemoryMagicLinkRepository(working),
                invitations=InMemoryInvitationRepository(working),
                assessment_instances=InMemoryAssessmentInstanceRepository(working),
                manager_relationships=InMemoryManagerRelationshipRepository(working),
            )
            self.database.tables = working
