"""Magic link entity.

A magic link authenticates whoever controls an email inbox. Each link is
single-use and expires a fixed time after issuance.
"""

from datetime import datetime

from pydantic import Field

from assess.domain.model.common import DomainModel, utc_now
from assess.domain.value import MagicLinkId, MagicLinkToken


class MagicLink(DomainModel):
    """Magic link token record.

    Business rules:
    - At most one unused, unexpired link per email (issuing supersedes)
    - used flips to True exactly once and never back
    - Expired rows are deleted by the cleanup sweep whether used or not
    """

    id: MagicLinkId
    email: str
    token: MagicLinkToken
    expires_at: datetime
    used: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    def is_expired(self, now: datetime) -> bool:
        """Check if the link has expired at the given instant."""
        return now > self.expires_at

    def is_usable(self, now: datetime) -> bool:
        """Check if the link can still be verified."""
        return not self.used and not self.is_expired(now)
