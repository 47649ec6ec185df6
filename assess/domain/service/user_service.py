"""User domain service."""

from datetime import datetime
from typing import Callable
from uuid import uuid4

import logfire

from assess.domain.error import BusinessRuleViolationError, NotFoundError
from assess.domain.model import User
from assess.domain.model.common import utc_now
from assess.domain.repository import UnitOfWork
from assess.domain.value import UserId, UserRole, normalize_email

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize user service.

        Args:
            unit_of_work: Transaction factory
            clock: Source of the current time
        """
        self.unit_of_work = unit_of_work
        self.clock = clock

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            async with self.unit_of_work.transaction() as tx:
                user = await tx.users.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email, compared case-insensitively."""
        async with self.unit_of_work.transaction() as tx:
            return await tx.users.find_by_email(normalize_email(email))

    async def create_user(
        self,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a user directly, outside the invitation flow.

        Used to provision managers and administrators.

        Raises:
            BusinessRuleViolationError: If the email is already registered
        """
        email = normalize_email(email)
        with logfire.span("user_service.create_user", role=role.value):
            async with self.unit_of_work.transaction() as tx:
                if await tx.users.find_by_email(email) is not None:
                    raise BusinessRuleViolationError("Email already registered")

                user = await tx.users.save(
                    User(
                        id=UserId(uuid4()),
                        email=email,
                        first_name=first_name,
                        last_name=last_name,
                        role=role,
                        is_active=True,
                        created_at=self.clock(),
                    )
                )
            logfire.info("User created", user_id=str(user.id), role=role.value)
            return user
