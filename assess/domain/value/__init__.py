"""Domain value objects for assessments."""

from assess.domain.value.identifiers import (
    AssessmentInstanceId,
    InvitationId,
    MagicLinkId,
    ManagerRelationshipId,
    PeriodId,
    TemplateId,
    UserId,
)
from assess.domain.value.types import (
    AssessmentInstanceStatus,
    InvitationStatus,
    InvitationToken,
    MagicLinkToken,
    SecureToken,
    UserRole,
    normalize_email,
)

__all__ = [
    # Identifiers
    "UserId",
    "MagicLinkId",
    "InvitationId",
    "AssessmentInstanceId",
    "ManagerRelationshipId",
    "TemplateId",
    "PeriodId",
    # Types
    "AssessmentInstanceStatus",
    "InvitationStatus",
    "InvitationToken",
    "MagicLinkToken",
    "SecureToken",
    "UserRole",
    "normalize_email",
]
