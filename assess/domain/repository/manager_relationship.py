"""Manager relationship repository interface."""

from abc import ABC, abstractmethod

from assess.domain.model.manager_relationship import ManagerRelationship
from assess.domain.value import PeriodId, UserId


class ManagerRelationshipRepository(ABC):
    """Repository for ManagerRelationship entity."""

    @abstractmethod
    async def find_by_manager(
        self, manager_id: UserId, period_id: PeriodId | None = None
    ) -> list[ManagerRelationship]:
        """Find relationships where the user is the manager.

        Args:
            manager_id: The manager's ID
            period_id: Optional period filter

        Returns:
            List of relationships
        """
        pass

    @abstractmethod
    async def find_by_subordinate(
        self, subordinate_id: UserId
    ) -> list[ManagerRelationship]:
        """Find relationships where the user is the subordinate."""
        pass

    @abstractmethod
    async def save(self, relationship: ManagerRelationship) -> ManagerRelationship:
        """Insert a new relationship.

        Raises:
            IntegrityError: If the manager/subordinate/period edge already exists
        """
        pass
