"""In-memory database for testing.

Emulates serializable transactions: a transaction works on a copy of every
table taken when it begins, and the copy replaces the live tables only if the
block exits without an exception. Transactions run one at a time.
"""

import asyncio
from dataclasses import dataclass, field, replace
from uuid import UUID

from assess.domain.model import (
    AssessmentInstance,
    Invitation,
    MagicLink,
    ManagerRelationship,
    User,
)


@dataclass
class InMemoryTables:
    """Row storage keyed by primary key."""

    users: dict[UUID, User] = field(default_factory=dict)
    magic_links: dict[UUID, MagicLink] = field(default_factory=dict)
    invitations: dict[UUID, Invitation] = field(default_factory=dict)
    assessment_instances: dict[UUID, AssessmentInstance] = field(default_factory=dict)
    manager_relationships: dict[UUID, ManagerRelationship] = field(
        default_factory=dict
    )

    def copy(self) -> "InMemoryTables":
        # Models are frozen, so copying the dicts is enough
        return replace(
            self,
            users=dict(self.users),
            magic_links=dict(self.magic_links),
            invitations=dict(self.invitations),
            assessment_instances=dict(self.assessment_instances),
            manager_relationships=dict(self.manager_relationships),
        )


class InMemoryDatabase:
    """Committed state plus the lock that serializes transactions."""

    def __init__(self) -> None:
        self.tables = InMemoryTables()
        self.lock = asyncio.Lock()
