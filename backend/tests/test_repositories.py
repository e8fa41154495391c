import pytest

from app.models.invitation import InvitationStatus
from app.repositories import InvitationRepository, ItemRepository, TodoListRepository


class TestInvitationRepository:

    @pytest.mark.asyncio
    async def test_find_accepted_membership(self, seed, session_factory):
        owner = await seed.user()
        member = await seed.user()
        pending = await seed.user()
        todo_list = await seed.todo_list(owner.id)
        await seed.member(todo_list.id, owner.id, member.id, approved=False)
        await seed.invitation(todo_list.id, owner.id, pending.id)

        async with session_factory() as db:
            repo = InvitationRepository(db)
            found = await repo.find_accepted_membership(todo_list.id, member.id)
            assert found is not None and found.approved is False
            assert await repo.find_accepted_membership(todo_list.id, member.id, approved_only=True) is None
            assert await repo.find_accepted_membership(todo_list.id, pending.id) is None

    @pytest.mark.asyncio
    async def test_find_by_invitee_and_status_paginates(self, seed, session_factory):
        owner = await seed.user()
        invitee = await seed.user()
        for n in range(3):
            todo_list = await seed.todo_list(owner.id, name=f"List {n}")
            await seed.invitation(todo_list.id, owner.id, invitee.id)

        async with session_factory() as db:
            rows, total = await InvitationRepository(db).find_by_invitee_and_status(
                invitee.id, InvitationStatus.PENDING, offset=0, limit=2
            )
            accepted, accepted_total = await InvitationRepository(db).find_by_invitee_and_status(
                invitee.id, InvitationStatus.ACCEPTED
            )

        assert total == 3
        assert len(rows) == 2
        assert accepted == [] and accepted_total == 0

    @pytest.mark.asyncio
    async def test_set_status_only_moves_from_pending(self, seed, session_factory):
        owner = await seed.user()
        invitee = await seed.user()
        todo_list = await seed.todo_list(owner.id)
        invitation = await seed.invitation(
            todo_list.id, owner.id, invitee.id, status=InvitationStatus.REJECTED
        )

        async with session_factory() as db:
            updated = await InvitationRepository(db).set_status(
                invitation.id, InvitationStatus.ACCEPTED
            )
            await db.commit()

        assert updated.status == InvitationStatus.REJECTED.value


class TestTodoListRepository:

    @pytest.mark.asyncio
    async def test_archive_touches_only_the_flag(self, seed, session_factory):
        owner = await seed.user()
        todo_list = await seed.todo_list(owner.id, name="Keep my name")

        async with session_factory() as db:
            archived = await TodoListRepository(db).archive(todo_list.id)
            await db.commit()

        assert archived.is_archived is True
        assert archived.name == "Keep my name"


class TestItemRepository:

    @pytest.mark.asyncio
    async def test_content_update_keeps_completion(self, seed, session_factory):
        owner = await seed.user()
        todo_list = await seed.todo_list(owner.id)
        item = await seed.item(todo_list.id)

        async with session_factory() as db:
            repo = ItemRepository(db)
            await repo.set_completed(item.id, completed_by=owner.id, completed_at=None)
            updated = await repo.update_content(item.id, "Buy bread")
            await db.commit()

        assert updated.content == "Buy bread"
        assert updated.is_completed is True
        assert updated.completed_by == owner.id
