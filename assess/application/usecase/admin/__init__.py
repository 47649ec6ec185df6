"""Admin use cases."""

from assess.application.usecase.admin.cleanup import (
    CleanupRequest,
    CleanupResponse,
    CleanupUseCase,
)

__all__ = [
    "CleanupRequest",
    "CleanupResponse",
    "CleanupUseCase",
]
