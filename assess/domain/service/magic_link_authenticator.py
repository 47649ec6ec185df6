"""Magic link authentication domain service."""

from datetime import datetime, timedelta
from typing import Any, Callable
from uuid import uuid4

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from assess.config import AuthSettings
from assess.domain.model import AuthenticatedUser, MagicLink
from assess.domain.model.common import utc_now
from assess.domain.repository import UnitOfWork
from assess.domain.value import MagicLinkId, MagicLinkToken, normalize_email

from .base import Service


class MagicLinkAuthenticator(Service):
    """Issues and verifies single-use magic link tokens.

    Issuing a link for an email supersedes every earlier unused link for that
    email, so at most one link per address can be verified at a time. A link
    is consumed before the user it belongs to is looked up.
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        auth_settings: AuthSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize authenticator.

        Args:
            unit_of_work: Transaction factory
            auth_settings: Token lifetime and retry settings
            clock: Source of the current time
        """
        self.unit_of_work = unit_of_work
        self.auth_settings = auth_settings
        self.clock = clock

    async def issue(self, email: str) -> MagicLinkToken:
        """Issue a new magic link token for an email.

        No user lookup happens here, so the response cannot reveal whether an
        account exists.

        Args:
            email: Address the link will be sent to

        Returns:
            The freshly issued token

        Raises:
            IntegrityError: If concurrent issues for the same email kept
                colliding after every attempt
        """
        email = normalize_email(email)
        attempts = max(1, self.auth_settings.magic_link_issue_attempts)

        with logfire.span("magic_link_authenticator.issue"):
            attempt = 0
            while True:
                attempt += 1
                now = self.clock()
                magic_link = MagicLink(
                    id=MagicLinkId(uuid4()),
                    email=email,
                    token=MagicLinkToken.generate(),
                    expires_at=now
                    + timedelta(hours=self.auth_settings.magic_link_ttl_hours),
                    used=False,
                    created_at=now,
                )
                try:
                    async with self.unit_of_work.transaction() as tx:
                        superseded = await tx.magic_links.mark_unused_as_used(email)
                        await tx.magic_links.save(magic_link)
                except IntegrityError:
                    # Another issue for this email committed first
                    if attempt >= attempts:
                        raise
                    logfire.warn("Magic link issue collided", attempt=attempt)
                    continue

                logfire.info(
                    "Magic link issued",
                    magic_link_id=str(magic_link.id),
                    token=magic_link.token.preview,
                    superseded=superseded,
                )
                return magic_link.token

    async def verify(self, token: Any) -> AuthenticatedUser | None:
        """Verify a magic link token and resolve its user.

        Args:
            token: Raw token string from the link

        Returns:
            The authenticated user, or None if the token is malformed,
            unknown, already used, expired, lost a concurrent verify, or
            belongs to an email with no account
        """
        try:
            parsed = MagicLinkToken(token)
        except ValidationError:
            logfire.info("Magic link token malformed")
            return None

        with logfire.span("magic_link_authenticator.verify", token=parsed.preview):
            now = self.clock()
            async with self.unit_of_work.transaction() as tx:
                magic_link = await tx.magic_links.find_by_token(parsed)
                if magic_link is None:
                    logfire.warn("Magic link not found", token=parsed.preview)
                    return None

                if magic_link.used:
                    logfire.warn("Magic link already used", token=parsed.preview)
                    return None

                if magic_link.is_expired(now):
                    logfire.warn("Magic link expired", token=parsed.preview)
                    return None

                consumed = await tx.magic_links.consume(magic_link.id, now)
                if not consumed:
                    logfire.warn("Magic link consumed concurrently", token=parsed.preview)
                    return None

                user = await tx.users.find_by_email(magic_link.email)

            if user is None:
                logfire.warn("Magic link email has no account", token=parsed.preview)
                return None

            logfire.info("Magic link verified", user_id=str(user.id))
            return AuthenticatedUser.from_user(user)

    async def cleanup_expired_tokens(self) -> int:
        """Delete expired magic links whether or not they were used.

        Returns:
            Number of links deleted
        """
        with logfire.span("magic_link_authenticator.cleanup_expired_tokens"):
            async with self.unit_of_work.transaction() as tx:
                deleted = await tx.magic_links.delete_expired(self.clock())
            logfire.info("Expired magic links deleted", count=deleted)
            return deleted

    async def invalidate_tokens_for_email(self, email: str) -> int:
        """Mark every outstanding magic link for an email as used.

        Args:
            email: Address whose links should stop working

        Returns:
            Number of links invalidated
        """
        with logfire.span("magic_link_authenticator.invalidate_tokens_for_email"):
            async with self.unit_of_work.transaction() as tx:
                invalidated = await tx.magic_links.mark_unused_as_used(
                    normalize_email(email)
                )
            logfire.info("Magic links invalidated", count=invalidated)
            return invalidated
