"""PostgreSQL repository implementations."""

from assess.persistence.repository.assessment_instance import (
    PostgresAssessmentInstanceRepository,
)
from assess.persistence.repository.invitation import PostgresInvitationRepository
from assess.persistence.repository.magic_link import PostgresMagicLinkRepository
from assess.persistence.repository.manager_relationship import (
    PostgresManagerRelationshipRepository,
)
from assess.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from assess.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresMagicLinkRepository",
    "PostgresInvitationRepository",
    "PostgresAssessmentInstanceRepository",
    "PostgresManagerRelationshipRepository",
    "SqlAlchemyUnitOfWork",
]
