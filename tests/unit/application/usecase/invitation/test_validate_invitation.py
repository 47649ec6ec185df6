"""Unit tests for ValidateInvitationUseCase."""

from datetime import timedelta

import pytest

from assess.application.usecase.invitation import (
    ValidateInvitationRequest,
    ValidateInvitationUseCase,
)
from assess.domain.model.common import utc_now
from assess.domain.repository import UnitOfWork
from assess.domain.value import InvitationStatus, InvitationToken
from tests.conftest import make_invitation, seed_invitation, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestValidateInvitationUseCase:
    """Tests for ValidateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_validate_pending_invitation(self, unit_env):
        """Should report a pending, unexpired invitation as valid."""
        # Arrange
        use_case = await unit_env.get(ValidateInvitationUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        manager = await seed_user(unit_of_work)
        invitation = await seed_invitation(
            unit_of_work, make_invitation(manager, invited_at=utc_now())
        )

        # Act
        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        # Assert
        assert response.valid is True
        assert response.invitation_id == invitation.id
        assert response.email == "jane@co.com"
        assert response.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_validate_expired_invitation(self, unit_env):
        use_case = await unit_env.get(ValidateInvitationUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        manager = await seed_user(unit_of_work)
        invitation = await seed_invitation(
            unit_of_work,
            make_invitation(manager, invited_at=utc_now() - timedelta(days=8)),
        )

        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        assert response.valid is False
        assert response.message == "Invitation has expired"
        assert response.invitation_id == invitation.id

    @pytest.mark.asyncio
    async def test_validate_accepted_invitation(self, unit_env):
        use_case = await unit_env.get(ValidateInvitationUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        manager = await seed_user(unit_of_work)
        now = utc_now()
        invitation = await seed_invitation(
            unit_of_work,
            make_invitation(
                manager,
                invited_at=now,
                status=InvitationStatus.ACCEPTED,
                accepted_at=now,
            ),
        )

        response = await use_case.execute(
            ValidateInvitationRequest(token=invitation.token.root)
        )

        assert response.valid is False
        assert response.message == "Invitation has been accepted"

    @pytest.mark.parametrize("token", ["bogus", InvitationToken.generate().root])
    @pytest.mark.asyncio
    async def test_validate_unknown_token(self, unit_env, token):
        use_case = await unit_env.get(ValidateInvitationUseCase)

        response = await use_case.execute(ValidateInvitationRequest(token=token))

        assert response.valid is False
        assert response.message == "Invitation not found"
        assert response.invitation_id is None
