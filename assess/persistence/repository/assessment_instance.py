"""SQL implementation of AssessmentInstance repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from assess.domain.model import AssessmentInstance
from assess.domain.repository import AssessmentInstanceRepository
from assess.domain.value import AssessmentInstanceId, UserId
from assess.persistence.mappers import (
    assessment_instance_to_dict,
    row_to_assessment_instance,
)
from assess.persistence.tables import assessment_instances_table


class PostgresAssessmentInstanceRepository(AssessmentInstanceRepository):
    """PostgreSQL implementation of AssessmentInstanceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, instance_id: AssessmentInstanceId
    ) -> Optional[AssessmentInstance]:
        """Find an assessment instance by ID."""
        stmt = select(assessment_instances_table).where(
            assessment_instances_table.c.id == instance_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_assessment_instance(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> list[AssessmentInstance]:
        """Find assessment instances assigned to a user."""
        stmt = (
            select(assessment_instances_table)
            .where(assessment_instances_table.c.user_id == user_id)
            .order_by(assessment_instances_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_assessment_instance(dict(row)) for row in result.mappings()]

    async def save(self, instance: AssessmentInstance) -> AssessmentInstance:
        """Insert a new assessment instance."""
        stmt = insert(assessment_instances_table).values(
            **assessment_instance_to_dict(instance)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return instance
