"""Application layer DI providers."""

from dishka import Scope, provide

from assess.application.usecase.admin import CleanupUseCase
from assess.application.usecase.auth import (
    RequestMagicLinkUseCase,
    VerifyMagicLinkUseCase,
)
from assess.application.usecase.invitation import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    DeclineInvitationUseCase,
    DeleteInvitationUseCase,
    GetInvitationsUseCase,
    SendReminderUseCase,
    UpdateInvitationStatusUseCase,
    ValidateInvitationUseCase,
)
from assess.config import Settings
from assess.domain.service import (
    EmailSender,
    InvitationAcceptanceCoordinator,
    InvitationService,
    MagicLinkAuthenticator,
)
from assess.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_request_magic_link_use_case(
        self,
        authenticator: MagicLinkAuthenticator,
        email_sender: EmailSender,
        settings: Settings,
    ) -> RequestMagicLinkUseCase:
        """Provide request magic link use case."""
        return RequestMagicLinkUseCase(
            authenticator=authenticator, email_sender=email_sender, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_verify_magic_link_use_case(
        self, authenticator: MagicLinkAuthenticator
    ) -> VerifyMagicLinkUseCase:
        """Provide verify magic link use case."""
        return VerifyMagicLinkUseCase(authenticator=authenticator)

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self,
        invitation_service: InvitationService,
        email_sender: EmailSender,
        settings: Settings,
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service,
            email_sender=email_sender,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self, coordinator: InvitationAcceptanceCoordinator
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(coordinator=coordinator)

    @provide(scope=Scope.REQUEST)
    def get_get_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> GetInvitationsUseCase:
        """Provide get invitations use case."""
        return GetInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_decline_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> DeclineInvitationUseCase:
        """Provide decline invitation use case."""
        return DeclineInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_update_invitation_status_use_case(
        self, invitation_service: InvitationService
    ) -> UpdateInvitationStatusUseCase:
        """Provide update invitation status use case."""
        return UpdateInvitationStatusUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> DeleteInvitationUseCase:
        """Provide delete invitation use case."""
        return DeleteInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_send_reminder_use_case(
        self,
        invitation_service: InvitationService,
        email_sender: EmailSender,
        settings: Settings,
    ) -> SendReminderUseCase:
        """Provide send reminder use case."""
        return SendReminderUseCase(
            invitation_service=invitation_service,
            email_sender=email_sender,
            settings=settings,
        )

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_cleanup_use_case(
        self,
        authenticator: MagicLinkAuthenticator,
        invitation_service: InvitationService,
    ) -> CleanupUseCase:
        """Provide cleanup use case."""
        return CleanupUseCase(
            authenticator=authenticator, invitation_service=invitation_service
        )
