"""Domain layer DI providers."""

from dishka import Scope, provide

from assess.config import AuthSettings, InvitationSettings
from assess.domain.repository import UnitOfWork
from assess.domain.service import (
    InvitationAcceptanceCoordinator,
    InvitationService,
    MagicLinkAuthenticator,
    UserService,
)
from assess.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; each opens its own transactions
    through the unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_magic_link_authenticator(
        self, unit_of_work: UnitOfWork, auth_settings: AuthSettings
    ) -> MagicLinkAuthenticator:
        """Provide magic link authenticator."""
        return MagicLinkAuthenticator(
            unit_of_work=unit_of_work, auth_settings=auth_settings
        )

    @provide
    def get_invitation_acceptance_coordinator(
        self, unit_of_work: UnitOfWork
    ) -> InvitationAcceptanceCoordinator:
        """Provide invitation acceptance coordinator."""
        return InvitationAcceptanceCoordinator(unit_of_work=unit_of_work)

    @provide
    def get_invitation_service(
        self, unit_of_work: UnitOfWork, invitation_settings: InvitationSettings
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            unit_of_work=unit_of_work, invitation_settings=invitation_settings
        )

    @provide
    def get_user_service(self, unit_of_work: UnitOfWork) -> UserService:
        """Provide user domain service."""
        return UserService(unit_of_work=unit_of_work)
