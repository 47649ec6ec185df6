"""Unit tests for GetInvitationsUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from assess.application.usecase.invitation import (
    GetInvitationsRequest,
    GetInvitationsUseCase,
)
from assess.domain.repository import UnitOfWork
from tests.conftest import make_invitation, seed_invitation, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetInvitationsUseCase:
    """Tests for GetInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_get_by_manager(self, unit_env):
        use_case = await unit_env.get(GetInvitationsUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        manager = await seed_user(unit_of_work)
        invitation = await seed_invitation(unit_of_work, make_invitation(manager))

        response = await use_case.execute(GetInvitationsRequest(manager_id=manager.id))

        assert [i.id for i in response.invitations] == [invitation.id]

    @pytest.mark.asyncio
    async def test_get_by_email(self, unit_env):
        use_case = await unit_env.get(GetInvitationsUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        manager = await seed_user(unit_of_work)
        invitation = await seed_invitation(unit_of_work, make_invitation(manager))

        response = await use_case.execute(GetInvitationsRequest(email="Jane@Co.com"))

        assert [i.id for i in response.invitations] == [invitation.id]

    @pytest.mark.asyncio
    async def test_get_no_matches(self, unit_env):
        use_case = await unit_env.get(GetInvitationsUseCase)

        response = await use_case.execute(GetInvitationsRequest(manager_id=uuid4()))

        assert response.invitations == []

    def test_request_requires_exactly_one_filter(self):
        with pytest.raises(ValidationError):
            GetInvitationsRequest()
        with pytest.raises(ValidationError):
            GetInvitationsRequest(manager_id=uuid4(), email="a@co.com")
