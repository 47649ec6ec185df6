"""Invitation use cases."""

from assess.application.usecase.invitation.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from assess.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from assess.application.usecase.invitation.decline_invitation import (
    DeclineInvitationRequest,
    DeclineInvitationResponse,
    DeclineInvitationUseCase,
)
from assess.application.usecase.invitation.delete_invitation import (
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
)
from assess.application.usecase.invitation.get_invitations import (
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
)
from assess.application.usecase.invitation.item import InvitationItem
from assess.application.usecase.invitation.send_reminder import (
    SendReminderRequest,
    SendReminderResponse,
    SendReminderUseCase,
)
from assess.application.usecase.invitation.update_invitation_status import (
    UpdateInvitationStatusRequest,
    UpdateInvitationStatusResponse,
    UpdateInvitationStatusUseCase,
)
from assess.application.usecase.invitation.validate_invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "DeclineInvitationRequest",
    "DeclineInvitationResponse",
    "DeclineInvitationUseCase",
    "DeleteInvitationRequest",
    "DeleteInvitationUseCase",
    "GetInvitationsRequest",
    "GetInvitationsResponse",
    "GetInvitationsUseCase",
    "InvitationItem",
    "SendReminderRequest",
    "SendReminderResponse",
    "SendReminderUseCase",
    "UpdateInvitationStatusRequest",
    "UpdateInvitationStatusResponse",
    "UpdateInvitationStatusUseCase",
    "ValidateInvitationRequest",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
]
