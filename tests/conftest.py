"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from assess.config import AuthSettings, InvitationSettings
from assess.domain.model import Invitation, User
from assess.domain.repository import UnitOfWork
from assess.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    PeriodId,
    TemplateId,
    UserId,
    UserRole,
)
from assess.persistence.database import create_session_factory
from assess.persistence.repository import SqlAlchemyUnitOfWork
from assess.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryUnitOfWork,
)
from assess.persistence.tables import metadata


class FakeClock:
    """Controllable replacement for utc_now."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_user(
    email: str = "manager@example.com", role: UserRole = UserRole.MANAGER
) -> User:
    """Build a user for seeding a store."""
    return User(
        id=UserId(uuid4()),
        email=email,
        first_name="Morgan",
        last_name="Lee",
        role=role,
    )


async def seed_user(unit_of_work: UnitOfWork, user: User | None = None) -> User:
    """Insert a user in its own transaction."""
    user = user or make_user()
    async with unit_of_work.transaction() as tx:
        await tx.users.save(user)
    return user


def make_invitation(
    manager: User,
    email: str = "jane@co.com",
    invited_at: datetime | None = None,
    **overrides,
) -> Invitation:
    """Build a pending invitation from a manager, valid for a week."""
    invited_at = invited_at or FakeClock().now
    fields = dict(
        id=InvitationId(uuid4()),
        manager_id=manager.id,
        template_id=TemplateId(3),
        period_id=PeriodId(7),
        email=email,
        first_name="Jane",
        last_name="Doe",
        status=InvitationStatus.PENDING,
        token=InvitationToken.generate(),
        invited_at=invited_at,
        expires_at=invited_at + timedelta(days=7),
    )
    fields.update(overrides)
    return Invitation(**fields)


async def seed_invitation(unit_of_work: UnitOfWork, invitation: Invitation) -> Invitation:
    """Insert an invitation in its own transaction."""
    async with unit_of_work.transaction() as tx:
        await tx.invitations.save(invitation)
    return invitation


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings()


@pytest.fixture
def invitation_settings() -> InvitationSettings:
    return InvitationSettings()


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def memory_uow(memory_db: InMemoryDatabase) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(memory_db)


@pytest_asyncio.fixture
async def sqlite_uow(tmp_path):
    """SQL unit of work on a throwaway SQLite file database."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'assess.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield SqlAlchemyUnitOfWork(create_session_factory(engine))

    await engine.dispose()
