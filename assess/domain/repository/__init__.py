"""Repository interfaces for the assessment domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from assess.domain.repository.assessment_instance import AssessmentInstanceRepository
from assess.domain.repository.invitation import InvitationRepository
from assess.domain.repository.magic_link import MagicLinkRepository
from assess.domain.repository.manager_relationship import (
    ManagerRelationshipRepository,
)
from assess.domain.repository.unit_of_work import Transaction, UnitOfWork
from assess.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "MagicLinkRepository",
    "InvitationRepository",
    "AssessmentInstanceRepository",
    "ManagerRelationshipRepository",
    "Transaction",
    "UnitOfWork",
]
