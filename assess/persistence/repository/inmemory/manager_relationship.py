"""In-memory manager relationship repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from assess.domain.model import ManagerRelationship
from assess.domain.repository.manager_relationship import (
    ManagerRelationshipRepository,
)
from assess.domain.value import PeriodId, UserId
from assess.persistence.repository.inmemory.database import InMemoryTables


class InMemoryManagerRelationshipRepository(ManagerRelationshipRepository):
    """In-memory implementation of ManagerRelationshipRepository for testing."""

    def __init__(self, tables: InMemoryTables) -> None:
        self._relationships = tables.manager_relationships

    async def find_by_manager(
        self, manager_id: UserId, period_id: Optional[PeriodId] = None
    ) -> list[ManagerRelationship]:
        """Find relationships where the user is the manager."""
        return [
            r
            for r in self._relationships.values()
            if r.manager_id == manager_id
            and (period_id is None or r.period_id == period_id)
        ]

    async def find_by_subordinate(
        self, subordinate_id: UserId
    ) -> list[ManagerRelationship]:
        """Find relationships where the user is the subordinate."""
        return [
            r for r in self._relationships.values() if r.subordinate_id == subordinate_id
        ]

    async def save(self, relationship: ManagerRelationship) -> ManagerRelationship:
        """Insert a new relationship.

        Raises:
            IntegrityError: If the manager/subordinate/period edge exists
        """
        for other in self._relationships.values():
            if (
                other.manager_id == relationship.manager_id
                and other.subordinate_id == relationship.subordinate_id
                and other.period_id == relationship.period_id
            ):
                raise IntegrityError("Duplicate manager relationship", None, Exception())
        self._relationships[relationship.id] = relationship
        return relationship
