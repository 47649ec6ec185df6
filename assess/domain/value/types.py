"""Domain value objects for assessments.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
import secrets
from enum import Enum

from pydantic import ConfigDict, field_validator

from assess.domain.value.common import RootValueObject

# 32 random bytes, hex encoded
SECURE_TOKEN_PATTERN = re.compile(r"[0-9a-f]{64}")


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    MANAGER = "manager"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class InvitationStatus(str, Enum):
    """Status of an invitation.

    Acceptance only ever moves PENDING -> ACCEPTED. DECLINED and EXPIRED are
    written by the decline path and the expiry sweep.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    EXPIRED = "expired"


class AssessmentInstanceStatus(str, Enum):
    """Status of an assessment instance."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class SecureToken(RootValueObject[str]):
    """Opaque random token: exactly 64 lowercase hex characters."""

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is 64 lowercase hex characters."""
        if not SECURE_TOKEN_PATTERN.fullmatch(v):
            raise ValueError("Token must be 64 lowercase hex characters")
        return v

    @classmethod
    def generate(cls):
        """Create a new token from 32 bytes of OS randomness."""
        return cls(root=secrets.token_hex(32))

    @property
    def preview(self) -> str:
        """Short prefix that is safe to log."""
        return self.root[:8] + "..."


class MagicLinkToken(SecureToken):
    """Single-use login token."""


class InvitationToken(SecureToken):
    """Token embedded in an invitation link."""


def normalize_email(email: str) -> str:
    """Canonical form used for storage and comparison: stripped, lowercase."""
    return email.strip().lower()
