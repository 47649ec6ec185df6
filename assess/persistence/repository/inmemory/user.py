"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from assess.domain.model import User
from assess.domain.repository.user import UserRepository
from assess.domain.value import UserId
from assess.persistence.repository.inmemory.database import InMemoryTables


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, tables: InMemoryTables) -> None:
        self._users = tables.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Insert a new user.

        Raises:
            IntegrityError: If the id or email is already taken
        """
        if user.id in self._users or await self.find_by_email(user.email):
            raise IntegrityError("Duplicate user", None, Exception())
        self._users[user.id] = user
        return user
