"""In-memory assessment instance repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from assess.domain.model import AssessmentInstance
from assess.domain.repository.assessment_instance import AssessmentInstanceRepository
from assess.domain.value import AssessmentInstanceId, UserId
from assess.persistence.repository.inmemory.database import InMemoryTables


class InMemoryAssessmentInstanceRepository(AssessmentInstanceRepository):
    """In-memory implementation of AssessmentInstanceRepository for testing."""

    def __init__(self, tables: InMemoryTables) -> None:
        self._instances = tables.assessment_instances

    async def find_by_id(
        self, instance_id: AssessmentInstanceId
    ) -> Optional[AssessmentInstance]:
        """Find an assessment instance by ID."""
        return self._instances.get(instance_id)

    async def find_by_user(self, user_id: UserId) -> list[AssessmentInstance]:
        """Find assessment instances assigned to a user."""
        return sorted(
            (i for i in self._instances.values() if i.user_id == user_id),
            key=lambda i: i.created_at,
        )

    async def save(self, instance: AssessmentInstance) -> AssessmentInstance:
        """Insert a new assessment instance."""
        if instance.id in self._instances:
            raise IntegrityError("Duplicate assessment instance", None, Exception())
        self._instances[instance.id] = instance
        return instance
