"""User repository interface."""

from abc import ABC, abstractmethod

from assess.domain.model.user import User
from assess.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Find a user by email.

        Args:
            email: Lowercased email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If a user with the same email already exists
        """
        pass
