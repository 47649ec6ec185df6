"""Manager relationship entity."""

from datetime import datetime

from pydantic import Field

from assess.domain.model.common import DomainModel, utc_now
from assess.domain.value import ManagerRelationshipId, PeriodId, UserId


class ManagerRelationship(DomainModel):
    """Directed manager -> subordinate edge scoped to an assessment period.

    Unique on (manager_id, subordinate_id, period_id).
    """

    id: ManagerRelationshipId
    manager_id: UserId
    subordinate_id: UserId
    period_id: PeriodId
    created_at: datetime = Field(default_factory=utc_now)
