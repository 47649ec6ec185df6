"""Invitation routes.

Domain errors raised by the use cases are mapped to status codes by the
handlers registered in app.py.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel, Field, SecretStr
from pydantic import ValidationError as PydanticValidationError

from assess.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    DeclineInvitationRequest,
    DeclineInvitationResponse,
    DeclineInvitationUseCase,
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
    SendReminderRequest,
    SendReminderResponse,
    SendReminderUseCase,
    UpdateInvitationStatusRequest,
    UpdateInvitationStatusResponse,
    UpdateInvitationStatusUseCase,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from assess.domain.service import AcceptanceFailureReason
from assess.domain.value import InvitationStatus
from assess.interface.error import ValidationError

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)

ACCEPTANCE_FAILURE_STATUS = {
    AcceptanceFailureReason.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    AcceptanceFailureReason.ALREADY_USED_OR_EXPIRED: status.HTTP_410_GONE,
    AcceptanceFailureReason.EMAIL_MISMATCH: status.HTTP_400_BAD_REQUEST,
    AcceptanceFailureReason.USER_EXISTS: status.HTTP_409_CONFLICT,
}


class AcceptInvitationAPIRequest(BaseModel):
    """API request for accepting an invitation."""

    email: str = Field(min_length=3, max_length=255)
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    password: SecretStr


class UpdateInvitationStatusAPIRequest(BaseModel):
    """API request for overwriting an invitation's status."""

    status: InvitationStatus


@router.post(
    "", response_model=CreateInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def create_invitation(
    request: CreateInvitationRequest,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
) -> CreateInvitationResponse:
    """Create an invitation and email it to the invitee."""
    return await create_invitation_use_case.execute(request)


@router.get("", response_model=GetInvitationsResponse)
async def get_invitations(
    get_invitations_use_case: FromDishka[GetInvitationsUseCase],
    manager_id: UUID | None = Query(default=None),
    email: str | None = Query(default=None),
) -> GetInvitationsResponse:
    """List invitations by manager_id or by email."""
    try:
        request = GetInvitationsRequest(manager_id=manager_id, email=email)
    except PydanticValidationError:
        raise ValidationError("Provide exactly one of manager_id or email") from None
    return await get_invitations_use_case.execute(request)


@router.get("/token/{token}", response_model=ValidateInvitationResponse)
async def validate_invitation(
    token: str,
    validate_invitation_use_case: FromDishka[ValidateInvitationUseCase],
) -> ValidateInvitationResponse:
    """Check whether an invitation link can still be accepted."""
    return await validate_invitation_use_case.execute(
        ValidateInvitationRequest(token=token)
    )


@router.post("/token/{token}/decline", response_model=DeclineInvitationResponse)
async def decline_invitation(
    token: str,
    decline_invitation_use_case: FromDishka[DeclineInvitationUseCase],
) -> DeclineInvitationResponse:
    """Decline a pending invitation."""
    return await decline_invitation_use_case.execute(
        DeclineInvitationRequest(token=token)
    )


@router.post("/{invitation_id}/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    invitation_id: str,
    request: AcceptInvitationAPIRequest,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
) -> AcceptInvitationResponse:
    """Accept an invitation and provision the invitee's account.

    Raises:
        HTTPException: 404 unknown invitation, 410 already used or expired,
            400 email mismatch, 409 user already exists
    """
    response = await accept_invitation_use_case.execute(
        AcceptInvitationRequest(
            invitation_id=invitation_id,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
        )
    )
    if not response.success and response.reason is not None:
        raise HTTPException(
            status_code=ACCEPTANCE_FAILURE_STATUS[response.reason],
            detail=response.reason.value,
        )
    return response


@router.patch("/{invitation_id}/status", response_model=UpdateInvitationStatusResponse)
async def update_invitation_status(
    invitation_id: UUID,
    request: UpdateInvitationStatusAPIRequest,
    update_invitation_status_use_case: FromDishka[UpdateInvitationStatusUseCase],
) -> UpdateInvitationStatusResponse:
    """Overwrite an invitation's status (administrative)."""
    return await update_invitation_status_use_case.execute(
        UpdateInvitationStatusRequest(
            invitation_id=invitation_id, status=request.status
        )
    )


@router.post("/{invitation_id}/reminders", response_model=SendReminderResponse)
async def send_reminder(
    invitation_id: UUID,
    send_reminder_use_case: FromDishka[SendReminderUseCase],
) -> SendReminderResponse:
    """Email a reminder for a pending invitation."""
    return await send_reminder_use_case.execute(
        SendReminderRequest(invitation_id=invitation_id)
    )


@router.delete("/{invitation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invitation(
    invitation_id: UUID,
    delete_invitation_use_case: FromDishka[DeleteInvitationUseCase],
) -> Response:
    """Delete an invitation. Deleting twice is not an error."""
    await delete_invitation_use_case.execute(
        DeleteInvitationRequest(invitation_id=invitation_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
