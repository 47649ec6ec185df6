"""Integration tests for the SQL repositories.

Run against a throwaway SQLite database created from the table metadata, so
the conditional updates and unique indexes are exercised in real SQL.
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from assess.domain.model import (
    AssessmentInstance,
    MagicLink,
    ManagerRelationship,
)
from assess.domain.value import (
    AssessmentInstanceId,
    InvitationStatus,
    MagicLinkId,
    MagicLinkToken,
    ManagerRelationshipId,
    PeriodId,
    TemplateId,
    UserRole,
)
from tests.conftest import (
    FakeClock,
    make_invitation,
    make_user,
    seed_invitation,
    seed_user,
)

NOW = FakeClock().now


def _magic_link(email: str = "a@x.com", used: bool = False, **overrides) -> MagicLink:
    fields = dict(
        id=MagicLinkId(uuid4()),
        email=email,
        token=MagicLinkToken.generate(),
        expires_at=NOW + timedelta(hours=24),
        used=used,
        created_at=NOW,
    )
    fields.update(overrides)
    return MagicLink(**fields)


class TestMagicLinkRepository:
    """Integration tests for PostgresMagicLinkRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_token(self, sqlite_uow):
        """Round trip keeps the token value object and aware datetimes."""
        link = _magic_link()
        async with sqlite_uow.transaction() as tx:
            await tx.magic_links.save(link)

        async with sqlite_uow.transaction() as tx:
            found = await tx.magic_links.find_by_token(link.token)

        assert found == link
        assert found.expires_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_second_unused_link_for_email_rejected(self, sqlite_uow):
        """The partial unique index allows one unused link per email."""
        async with sqlite_uow.transaction() as tx:
            await tx.magic_links.save(_magic_link())

        with pytest.raises(IntegrityError):
            async with sqlite_uow.transaction() as tx:
                await tx.magic_links.save(_magic_link())

    @pytest.mark.asyncio
    async def test_used_links_do_not_collide(self, sqlite_uow):
        async with sqlite_uow.transaction() as tx:
            await tx.magic_links.save(_magic_link(used=True))
            await tx.magic_links.save(_magic_link(used=True))
            await tx.magic_links.save(_magic_link())

    @pytest.mark.asyncio
    async def test_supersede_then_insert(self, sqlite_uow):
        """Marking old links used frees the index for the new one."""
        old = _magic_link()
        async with sqlite_uow.transaction() as tx:
            await tx.magic_links.save(old)

        new = _magic_link()
        async with sqlite_uow.transaction() as tx:
            superseded = await tx.magic_links.mark_unused_as_used("a@x.com")
            await tx.magic_links.save(new)

        async with sqlite_uow.transaction() as tx:
            old_found = await tx.magic_links.find_by_token(old.token)
            new_found = await tx.magic_links.find_by_token(new.token)

        assert superseded == 1
        assert old_found.used is True
        assert new_found.used is False

    @pytest.mark.asyncio
    async def test_consume_only_once(self, sqlite_uow):
        link = _magic_link()
        async with sqlite_uow.transaction() as tx:
            await tx.magic_links.save(link)

        async with sqlite_uow.transaction() as tx:
            first = await tx.magic_links.consume(link.id, NOW)
        async with sqlite_uow.transaction() as tx:
            second = await tx.magic_links.consume(link.id, NOW)

        assert first is True
        assert second is False

    @pytest.mark.asyncio
    async def test_consume_refuses_expired(self, sqlite_uow):
        link = _magic_link()
        async with sqlite_uow.transaction() as tx:
            await tx.magic_links.save(link)

        async with sqlite_uow.transaction() as tx:
            consumed = await tx.magic_links.consume(
                link.id, link.expires_at + timedelta(seconds=1)
            )

        assert consumed is False

    @pytest.mark.asyncio
    async def test_delete_expired_ignores_used_flag(self, sqlite_uow):
        expired_at = NOW - timedelta(minutes=1)
        live = _magic_link("c@x.com")
        async with sqlite_uow.transaction() as tx:
            await tx.magic_links.save(_magic_link("a@x.com", expires_at=expired_at))
            await tx.magic_links.save(
                _magic_link("b@x.com", used=True, expires_at=expired_at)
            )
            await tx.magic_links.save(live)

        async with sqlite_uow.transaction() as tx:
            deleted = await tx.magic_links.delete_expired(NOW)
        async with sqlite_uow.transaction() as tx:
            again = await tx.magic_links.delete_expired(NOW)
            remaining = await tx.magic_links.find_by_token(live.token)

        assert deleted == 2
        assert again == 0
        assert remaining == live


class TestInvitationRepository:
    """Integration tests for PostgresInvitationRepository."""

    @pytest.mark.asyncio
    async def test_claim_for_acceptance_once(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        invitation = await seed_invitation(sqlite_uow, make_invitation(manager))

        async with sqlite_uow.transaction() as tx:
            first = await tx.invitations.claim_for_acceptance(invitation.id, NOW)
        async with sqlite_uow.transaction() as tx:
            second = await tx.invitations.claim_for_acceptance(invitation.id, NOW)
            stored = await tx.invitations.find_by_id(invitation.id)

        assert first is True
        assert second is False
        assert stored.status == InvitationStatus.ACCEPTED
        assert stored.accepted_at == NOW

    @pytest.mark.asyncio
    async def test_claim_refuses_expired(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        invitation = await seed_invitation(sqlite_uow, make_invitation(manager))

        async with sqlite_uow.transaction() as tx:
            claimed = await tx.invitations.claim_for_acceptance(
                invitation.id, invitation.expires_at + timedelta(seconds=1)
            )

        assert claimed is False

    @pytest.mark.asyncio
    async def test_find_by_token_and_update(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        invitation = await seed_invitation(sqlite_uow, make_invitation(manager))

        async with sqlite_uow.transaction() as tx:
            await tx.invitations.save(
                invitation.model_copy(
                    update={"reminder_count": 2, "last_reminder_sent": NOW}
                )
            )
        async with sqlite_uow.transaction() as tx:
            found = await tx.invitations.find_by_token(invitation.token)

        assert found.id == invitation.id
        assert found.reminder_count == 2
        assert found.last_reminder_sent == NOW

    @pytest.mark.asyncio
    async def test_duplicate_target_rejected(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        await seed_invitation(sqlite_uow, make_invitation(manager))

        with pytest.raises(IntegrityError):
            await seed_invitation(sqlite_uow, make_invitation(manager))

    @pytest.mark.asyncio
    async def test_find_by_manager_ordered(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        later = await seed_invitation(
            sqlite_uow,
            make_invitation(manager, "b@co.com", invited_at=NOW + timedelta(days=1)),
        )
        earlier = await seed_invitation(
            sqlite_uow, make_invitation(manager, "a@co.com", invited_at=NOW)
        )

        async with sqlite_uow.transaction() as tx:
            by_manager = await tx.invitations.find_by_manager(manager.id)
            by_email = await tx.invitations.find_by_email("b@co.com")
            exists = await tx.invitations.exists_for(
                manager.id, TemplateId(3), PeriodId(7), "a@co.com"
            )

        assert [i.id for i in by_manager] == [earlier.id, later.id]
        assert [i.id for i in by_email] == [later.id]
        assert exists is True

    @pytest.mark.asyncio
    async def test_decline_expire_and_delete(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        to_decline = await seed_invitation(
            sqlite_uow, make_invitation(manager, "a@co.com")
        )
        to_expire = await seed_invitation(
            sqlite_uow, make_invitation(manager, "b@co.com")
        )
        later = NOW + timedelta(days=30)

        async with sqlite_uow.transaction() as tx:
            declined = await tx.invitations.mark_declined(to_decline.id)
            declined_again = await tx.invitations.mark_declined(to_decline.id)
        async with sqlite_uow.transaction() as tx:
            expired = await tx.invitations.expire_pending(later)
        async with sqlite_uow.transaction() as tx:
            deleted = await tx.invitations.delete(to_expire.id)
            deleted_again = await tx.invitations.delete(to_expire.id)
            declined_row = await tx.invitations.find_by_id(to_decline.id)

        assert (declined, declined_again) == (True, False)
        assert expired == 1
        assert (deleted, deleted_again) == (True, False)
        assert declined_row.status == InvitationStatus.DECLINED


class TestUnitOfWork:
    """Integration tests for SqlAlchemyUnitOfWork."""

    @pytest.mark.asyncio
    async def test_rollback_discards_all_writes(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        invitation = await seed_invitation(sqlite_uow, make_invitation(manager))
        user = make_user("jane@co.com", UserRole.USER)

        with pytest.raises(RuntimeError):
            async with sqlite_uow.transaction() as tx:
                await tx.invitations.claim_for_acceptance(invitation.id, NOW)
                await tx.users.save(user)
                raise RuntimeError("abort")

        async with sqlite_uow.transaction() as tx:
            stored = await tx.invitations.find_by_id(invitation.id)
            found_user = await tx.users.find_by_email("jane@co.com")

        assert stored.status == InvitationStatus.PENDING
        assert found_user is None

    @pytest.mark.asyncio
    async def test_instances_and_relationships(self, sqlite_uow):
        manager = await seed_user(sqlite_uow)
        subordinate = await seed_user(sqlite_uow, make_user("jane@co.com"))
        instance = AssessmentInstance(
            id=AssessmentInstanceId(uuid4()),
            user_id=subordinate.id,
            period_id=PeriodId(7),
            template_id=TemplateId(3),
            created_at=NOW,
        )
        relationship = ManagerRelationship(
            id=ManagerRelationshipId(uuid4()),
            manager_id=manager.id,
            subordinate_id=subordinate.id,
            period_id=PeriodId(7),
            created_at=NOW,
        )

        async with sqlite_uow.transaction() as tx:
            await tx.assessment_instances.save(instance)
            await tx.manager_relationships.save(relationship)

        async with sqlite_uow.transaction() as tx:
            found_instance = await tx.assessment_instances.find_by_id(instance.id)
            by_user = await tx.assessment_instances.find_by_user(subordinate.id)
            by_manager = await tx.manager_relationships.find_by_manager(
                manager.id, PeriodId(7)
            )
            other_period = await tx.manager_relationships.find_by_manager(
                manager.id, PeriodId(8)
            )
            by_subordinate = await tx.manager_relationships.find_by_subordinate(
                subordinate.id
            )

        assert found_instance == instance
        assert by_user == [instance]
        assert by_manager == [relationship]
        assert other_period == []
        assert by_subordinate == [relationship]

        with pytest.raises(IntegrityError):
            async with sqlite_uow.transaction() as tx:
                await tx.manager_relationships.save(
                    relationship.model_copy(
                        update={"id": ManagerRelationshipId(uuid4())}
                    )
                )
