"""Magic link repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from assess.domain.model.magic_link import MagicLink
from assess.domain.value import MagicLinkId, MagicLinkToken


class MagicLinkRepository(ABC):
    """Repository for MagicLink entity.

    Every write that decides whether a token is still usable is a conditional
    update, so two transactions racing on the same row cannot both succeed.
    """

    @abstractmethod
    async def find_by_token(self, token: MagicLinkToken) -> MagicLink | None:
        """Find a magic link by token.

        Args:
            token: The magic link token

        Returns:
            The magic link if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, magic_link: MagicLink) -> MagicLink:
        """Insert a new magic link.

        Args:
            magic_link: The magic link to insert

        Returns:
            The saved magic link

        Raises:
            IntegrityError: If an unused link already exists for the email
        """
        pass

    @abstractmethod
    async def mark_unused_as_used(self, email: str) -> int:
        """Flip used on every unused link for an email.

        Args:
            email: Lowercased email address

        Returns:
            Number of links updated
        """
        pass

    @abstractmethod
    async def consume(self, magic_link_id: MagicLinkId, now: datetime) -> bool:
        """Mark a link used if it is still unused and unexpired.

        Args:
            magic_link_id: The link to consume
            now: Current time

        Returns:
            True if this call consumed the link, False if it was already
            used or has expired
        """
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every link with expires_at before now, used or not.

        Args:
            now: Current time

        Returns:
            Number of rows deleted
        """
        pass
