"""SQL implementation of ManagerRelationship repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from assess.domain.model import ManagerRelationship
from assess.domain.repository import ManagerRelationshipRepository
from assess.domain.value import PeriodId, UserId
from assess.persistence.mappers import (
    manager_relationship_to_dict,
    row_to_manager_relationship,
)
from assess.persistence.tables import manager_relationships_table


class PostgresManagerRelationshipRepository(ManagerRelationshipRepository):
    """PostgreSQL implementation of ManagerRelationshipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_manager(
        self, manager_id: UserId, period_id: Optional[PeriodId] = None
    ) -> list[ManagerRelationship]:
        """Find relationships where the user is the manager."""
        stmt = select(manager_relationships_table).where(
            manager_relationships_table.c.manager_id == manager_id
        )
        if period_id is not None:
            stmt = stmt.where(manager_relationships_table.c.period_id == period_id)
        stmt = stmt.order_by(manager_relationships_table.c.created_at)

        result = await self.session.execute(stmt)
        return [row_to_manager_relationship(dict(row)) for row in result.mappings()]

    async def find_by_subordinate(
        self, subordinate_id: UserId
    ) -> list[ManagerRelationship]:
        """Find relationships where the user is the subordinate."""
        stmt = (
            select(manager_relationships_table)
            .where(manager_relationships_table.c.subordinate_id == subordinate_id)
            .order_by(manager_relationships_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_manager_relationship(dict(row)) for row in result.mappings()]

    async def save(self, relationship: ManagerRelationship) -> ManagerRelationship:
        """Insert a new relationship."""
        stmt = insert(manager_relationships_table).values(
            **manager_relationship_to_dict(relationship)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return relationship
