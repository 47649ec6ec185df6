"""Assessment instance entity."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from assess.domain.model.common import DomainModel, utc_now
from assess.domain.value import (
    AssessmentInstanceId,
    AssessmentInstanceStatus,
    PeriodId,
    TemplateId,
    UserId,
)


class AssessmentInstance(DomainModel):
    """One user's run of an assessment template within a period.

    Created PENDING at invitation acceptance; later transitions are driven by
    the assessment-taking flow.
    """

    id: AssessmentInstanceId
    user_id: UserId
    period_id: PeriodId
    template_id: TemplateId
    status: AssessmentInstanceStatus = AssessmentInstanceStatus.PENDING
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    due_date: Optional[date] = None
    created_at: datetime = Field(default_factory=utc_now)
