"""In-memory repository implementations for testing."""

from .assessment_instance import InMemoryAssessmentInstanceRepository
from .database import InMemoryDatabase, InMemoryTables
from .invitation import InMemoryInvitationRepository
from .magic_link import InMemoryMagicLinkRepository
from .manager_relationship import InMemoryManagerRelationshipRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAssessmentInstanceRepository",
    "InMemoryDatabase",
    "InMemoryInvitationRepository",
    "InMemoryMagicLinkRepository",
    "InMemoryManagerRelationshipRepository",
    "InMemoryTables",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
