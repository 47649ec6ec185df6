"""SQL unit of work.

One AsyncSession per transaction; every repository in the Transaction
shares it, so all their statements commit or roll back together.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from assess.domain.repository import Transaction, UnitOfWork
from assess.persistence.repository.assessment_instance import (
    PostgresAssessmentInstanceRepository,
)
from assess.persistence.repository.invitation import PostgresInvitationRepository
from assess.persistence.repository.magic_link import PostgresMagicLinkRepository
from assess.persistence.repository.manager_relationship import (
    PostgresManagerRelationshipRepository,
)
from assess.persistence.repository.user import PostgresUserRepository


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work backed by an async session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """Open a session and a transaction on it.

        Commits when the block exits normally, rolls back and re-raises
        otherwise.
        """
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    yield Transaction(
                        users=PostgresUserRepository(session),
                        magic_links=PostgresMagicLinkRepository(session),
                        invitations=PostgresInvitationRepository(session),
                        assessment_instances=PostgresAssessmentInstanceRepository(
                            session
                        ),
                        manager_relationships=PostgresManagerRelationshipRepository(
                            session
                        ),
                    )
            except Exception as e:
                logfire.warn("Transaction rollback", error=type(e).__name__)
                raise
