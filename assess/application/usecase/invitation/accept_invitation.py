"""Accept invitation use case."""

import logfire
from pydantic import BaseModel, Field, SecretStr

from assess.application.usecase.base import BaseUseCase
from assess.domain.service import (
    AcceptanceFailed,
    AcceptanceFailureReason,
    InvitationAcceptance,
    InvitationAcceptanceCoordinator,
)
from assess.domain.value import AssessmentInstanceId, UserId


class AcceptInvitationRequest(BaseModel):
    """Invitee details submitted with the acceptance."""

    invitation_id: str
    email: str = Field(min_length=3, max_length=255)
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    password: SecretStr


class AcceptInvitationResponse(BaseModel):
    """Acceptance outcome."""

    success: bool
    user_id: UserId | None = None
    assessment_instance_id: AssessmentInstanceId | None = None
    reason: AcceptanceFailureReason | None = None


class AcceptInvitationUseCase(BaseUseCase):
    """Accept an invitation and provision the invitee."""

    def __init__(self, coordinator: InvitationAcceptanceCoordinator) -> None:
        self.coordinator = coordinator

    async def execute(self, request: AcceptInvitationRequest) -> AcceptInvitationResponse:
        with logfire.span("accept_invitation.execute"):
            result = await self.coordinator.accept_invitation(
                request.invitation_id,
                InvitationAcceptance(
                    email=request.email,
                    first_name=request.first_name,
                    last_name=request.last_name,
                    password=request.password,
                ),
            )
            if isinstance(result, AcceptanceFailed):
                return AcceptInvitationResponse(success=False, reason=result.reason)
            return AcceptInvitationResponse(
                success=True,
                user_id=result.user_id,
                assessment_instance_id=result.assessment_instance_id,
            )
