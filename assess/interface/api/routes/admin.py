"""Administrative routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from assess.application.usecase.admin import (
    CleanupRequest,
    CleanupResponse,
    CleanupUseCase,
)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.post("/cleanup", response_model=CleanupResponse)
async def cleanup(cleanup_use_case: FromDishka[CleanupUseCase]) -> CleanupResponse:
    """Delete expired magic links and expire stale invitations."""
    return await cleanup_use_case.execute(CleanupRequest())
