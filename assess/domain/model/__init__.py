"""Domain model entities for assessments."""

from assess.domain.model.assessment_instance import AssessmentInstance
from assess.domain.model.invitation import Invitation
from assess.domain.model.magic_link import MagicLink
from assess.domain.model.manager_relationship import ManagerRelationship
from assess.domain.model.user import AuthenticatedUser, User

__all__ = [
    "User",
    "AuthenticatedUser",
    "MagicLink",
    "Invitation",
    "AssessmentInstance",
    "ManagerRelationship",
]
