"""In-memory magic link repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from assess.domain.model import MagicLink
from assess.domain.repository.magic_link import MagicLinkRepository
from assess.domain.value import MagicLinkId, MagicLinkToken
from assess.persistence.repository.inmemory.database import InMemoryTables


class InMemoryMagicLinkRepository(MagicLinkRepository):
    """In-memory implementation of MagicLinkRepository for testing."""

    def __init__(self, tables: InMemoryTables) -> None:
        self._links = tables.magic_links

    async def find_by_token(self, token: MagicLinkToken) -> Optional[MagicLink]:
        """Find a magic link by token."""
        for link in self._links.values():
            if link.token == token:
                return link
        return None

    async def save(self, magic_link: MagicLink) -> MagicLink:
        """Insert a new magic link.

        Raises:
            IntegrityError: If the token is taken or the email already has an
                unused link
        """
        for link in self._links.values():
            if link.token == magic_link.token:
                raise IntegrityError("Duplicate magic link token", None, Exception())
            if not magic_link.used and not link.used and link.email == magic_link.email:
                raise IntegrityError("Unused magic link exists", None, Exception())
        self._links[magic_link.id] = magic_link
        return magic_link

    async def mark_unused_as_used(self, email: str) -> int:
        """Flip used on every unused link for an email."""
        count = 0
        for link_id, link in list(self._links.items()):
            if link.email == email and not link.used:
                self._links[link_id] = link.model_copy(update={"used": True})
                count += 1
        return count

    async def consume(self, magic_link_id: MagicLinkId, now: datetime) -> bool:
        """Mark a link used if it is still unused and unexpired."""
        link = self._links.get(magic_link_id)
        if link is None or link.used or link.expires_at < now:
            return False
        self._links[magic_link_id] = link.model_copy(update={"used": True})
        return True

    async def delete_expired(self, now: datetime) -> int:
        """Delete every link that expired before now."""
        expired = [
            link_id for link_id, link in self._links.items() if link.expires_at < now
        ]
        for link_id in expired:
            del self._links[link_id]
        return len(expired)
