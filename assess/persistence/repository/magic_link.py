"""SQL implementation of MagicLink repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from assess.domain.model import MagicLink
from assess.domain.repository import MagicLinkRepository
from assess.domain.value import MagicLinkId, MagicLinkToken
from assess.persistence.mappers import magic_link_to_dict, row_to_magic_link
from assess.persistence.tables import magic_links_table


class PostgresMagicLinkRepository(MagicLinkRepository):
    """PostgreSQL implementation of MagicLinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_token(self, token: MagicLinkToken) -> Optional[MagicLink]:
        """Find a magic link by its token."""
        stmt = select(magic_links_table).where(magic_links_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_magic_link(dict(row)) if row else None

    async def save(self, magic_link: MagicLink) -> MagicLink:
        """Insert a new magic link.

        The partial unique index on unused links per email raises
        IntegrityError if a concurrent issue already inserted one.
        """
        stmt = insert(magic_links_table).values(**magic_link_to_dict(magic_link))
        await self.session.execute(stmt)
        await self.session.flush()
        return magic_link

    async def mark_unused_as_used(self, email: str) -> int:
        """Flip used on every unused link for an email."""
        stmt = (
            update(magic_links_table)
            .where(
                and_(
                    magic_links_table.c.email == email,
                    magic_links_table.c.used.is_(False),
                )
            )
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def consume(self, magic_link_id: MagicLinkId, now: datetime) -> bool:
        """Mark a link used only if it is still unused and unexpired."""
        stmt = (
            update(magic_links_table)
            .where(
                and_(
                    magic_links_table.c.id == magic_link_id,
                    magic_links_table.c.used.is_(False),
                    magic_links_table.c.expires_at >= now,
                )
            )
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def delete_expired(self, now: datetime) -> int:
        """Delete every link that expired before now."""
        stmt = delete(magic_links_table).where(magic_links_table.c.expires_at < now)
        result = await self.session.execute(stmt)
        return result.rowcount
