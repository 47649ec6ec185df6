"""Assessment instance repository interface."""

from abc import ABC, abstractmethod

from assess.domain.model.assessment_instance import AssessmentInstance
from assess.domain.value import AssessmentInstanceId, UserId


class AssessmentInstanceRepository(ABC):
    """Repository for AssessmentInstance entity."""

    @abstractmethod
    async def find_by_id(
        self, instance_id: AssessmentInstanceId
    ) -> AssessmentInstance | None:
        """Find an assessment instance by ID."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[AssessmentInstance]:
        """Find all assessment instances assigned to a user."""
        pass

    @abstractmethod
    async def save(self, instance: AssessmentInstance) -> AssessmentInstance:
        """Insert a new assessment instance."""
        pass
