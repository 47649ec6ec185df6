"""Magic link authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from assess.application.usecase.auth import (
    RequestMagicLinkRequest,
    RequestMagicLinkResponse,
    RequestMagicLinkUseCase,
    VerifyMagicLinkRequest,
    VerifyMagicLinkResponse,
    VerifyMagicLinkUseCase,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/magic-link",
    response_model=RequestMagicLinkResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def request_magic_link(
    request: RequestMagicLinkRequest,
    request_magic_link_use_case: FromDishka[RequestMagicLinkUseCase],
) -> RequestMagicLinkResponse:
    """Email a login link.

    Always answers 202 so callers cannot learn which addresses have accounts.
    """
    return await request_magic_link_use_case.execute(request)


@router.post("/verify", response_model=VerifyMagicLinkResponse)
async def verify_magic_link(
    request: VerifyMagicLinkRequest,
    verify_magic_link_use_case: FromDishka[VerifyMagicLinkUseCase],
) -> VerifyMagicLinkResponse:
    """Consume a login link.

    Raises:
        HTTPException: 401 if the link is invalid, used, expired or has no
            matching account
    """
    response = await verify_magic_link_use_case.execute(request)
    if not response.authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired login link",
        )
    return response
