"""Unit tests for the in-memory unit of work."""

import pytest

from tests.conftest import make_user


class TestInMemoryUnitOfWork:
    """Transactions publish on success and discard on error."""

    @pytest.mark.asyncio
    async def test_commit_publishes_writes(self, memory_uow, memory_db):
        user = make_user()

        async with memory_uow.transaction() as tx:
            await tx.users.save(user)

        assert memory_db.tables.users == {user.id: user}

    @pytest.mark.asyncio
    async def test_exception_discards_writes(self, memory_uow, memory_db):
        with pytest.raises(RuntimeError):
            async with memory_uow.transaction() as tx:
                await tx.users.save(make_user())
                raise RuntimeError("abort")

        assert memory_db.tables.users == {}

    @pytest.mark.asyncio
    async def test_writes_invisible_until_commit(self, memory_uow, memory_db):
        """Committed state is untouched while the block is running."""
        user = make_user()

        async with memory_uow.transaction() as tx:
            await tx.users.save(user)
            assert memory_db.tables.users == {}
            assert await tx.users.find_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_lock_released_after_rollback(self, memory_uow, memory_db):
        with pytest.raises(RuntimeError):
            async with memory_uow.transaction():
                raise RuntimeError("abort")

        assert not memory_db.lock.locked()
        async with memory_uow.transaction() as tx:
            assert await tx.users.find_by_email("manager@example.com") is None
