"""User aggregate root.

Users either exist before this service sees them (managers, admins created
out-of-band) or are provisioned by accepting an invitation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from assess.domain.model.common import DomainModel, utc_now
from assess.domain.value import UserId, UserRole


class User(DomainModel):
    """User account.

    Business rules:
    - Email is unique and stored lowercase
    - Users created by invitation acceptance get role USER and are active
    """

    id: UserId
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = UserRole.USER
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)


class AuthenticatedUser(DomainModel):
    """Public view of a user returned after a successful magic link login."""

    id: UserId
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "AuthenticatedUser":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
        )
