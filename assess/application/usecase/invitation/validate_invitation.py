"""Validate invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from assess.application.usecase.base import BaseUseCase
from assess.domain.model.common import utc_now
from assess.domain.service import InvitationService
from assess.domain.value import InvitationId, InvitationStatus


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    token: str


class ValidateInvitationResponse(BaseModel):
    """Validate invitation response."""

    valid: bool
    invitation_id: InvitationId | None = None
    status: InvitationStatus | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    expires_at: datetime | None = None
    message: str


class ValidateInvitationUseCase(BaseUseCase):
    """Use case for checking an invitation link before showing the signup form."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Look up an invitation by token.

        Args:
            request: Validation request with token

        Returns:
            Validation response with invitation details or the reason it is
            unusable
        """
        with logfire.span("validate_invitation.execute"):
            invitation = await self.invitation_service.get_invitation_by_token(
                request.token
            )

            if not invitation:
                return ValidateInvitationResponse(
                    valid=False, message="Invitation not found"
                )

            details = dict(
                invitation_id=invitation.id,
                status=invitation.status,
                email=invitation.email,
                first_name=invitation.first_name,
                last_name=invitation.last_name,
                expires_at=invitation.expires_at,
            )

            if invitation.status != InvitationStatus.PENDING:
                return ValidateInvitationResponse(
                    valid=False,
                    message=f"Invitation has been {invitation.status.value}",
                    **details,
                )

            if invitation.is_expired(utc_now()):
                return ValidateInvitationResponse(
                    valid=False, message="Invitation has expired", **details
                )

            return ValidateInvitationResponse(
                valid=True, message="Valid invitation", **details
            )
