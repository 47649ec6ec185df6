"""Base use case shared by the auth, invitation and admin flows."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case: takes a request model and calls domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
