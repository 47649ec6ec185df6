"""Strongly typed identifiers for assessment domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Entities owned by this service
UserId = NewType("UserId", UUID)
MagicLinkId = NewType("MagicLinkId", UUID)
InvitationId = NewType("InvitationId", UUID)
AssessmentInstanceId = NewType("AssessmentInstanceId", UUID)
ManagerRelationshipId = NewType("ManagerRelationshipId", UUID)

# Entities owned by the external template/period CRUD services
TemplateId = NewType("TemplateId", int)
PeriodId = NewType("PeriodId", int)
