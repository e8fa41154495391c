import uuid

import pytest

from app.models.todo_list import TodoList


class TestListsApi:

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client):
        response = await client.get("/v1/todo-lists")
        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

        response = await client.get(
            "/v1/todo-lists", headers={"Authorization": "Bearer not-a-token"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_list_adds_owner_membership(self, client, seed):
        owner = await seed.user()

        response = await client.post(
            "/v1/todo-lists", json={"name": "Groceries"}, headers=owner.headers
        )
        assert response.status_code == 200
        body = response.json()
        assert body["owner_id"] == str(owner.id)
        assert body["is_archived"] is False
        assert body["location"] is None

        response = await client.get(
            f"/v1/todo-lists/{body['id']}/invitations", headers=owner.headers
        )
        assert response.status_code == 200
        invitations = response.json()["items"]
        assert len(invitations) == 1
        assert invitations[0]["invitee_id"] == str(owner.id)
        assert invitations[0]["status"] == "accepted"
        assert invitations[0]["approved"] is True

    @pytest.mark.asyncio
    async def test_create_list_requires_name(self, client, seed):
        owner = await seed.user()

        response = await client.post("/v1/todo-lists", json={}, headers=owner.headers)
        assert response.status_code == 400
        assert response.json()["error_code"] == "BAD_REQUEST"

        response = await client.post("/v1/todo-lists", json={"name": ""}, headers=owner.headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_active_and_archived_listings(self, client, seed):
        owner = await seed.user()
        other = await seed.user()
        active = await seed.todo_list(owner.id, name="Active")
        archived = await seed.todo_list(owner.id, name="Old", archived=True)
        await seed.todo_list(other.id, name="Not mine")

        response = await client.get("/v1/todo-lists", headers=owner.headers)
        assert response.status_code == 200
        page = response.json()
        assert page["total"] == 1
        assert [l["id"] for l in page["items"]] == [str(active.id)]

        response = await client.get("/v1/todo-lists/archived", headers=owner.headers)
        page = response.json()
        assert page["total"] == 1
        assert page["items"][0]["id"] == str(archived.id)

    @pytest.mark.asyncio
    async def test_listing_pagination(self, client, seed):
        owner = await seed.user()
        for n in range(3):
            await seed.todo_list(owner.id, name=f"List {n}")

        response = await client.get(
            "/v1/todo-lists", params={"offset": 1, "limit": 1}, headers=owner.headers
        )
        page = response.json()
        assert page["total"] == 3
        assert page["offset"] == 1
        assert page["limit"] == 1
        assert len(page["items"]) == 1

    @pytest.mark.asyncio
    async def test_get_list_as_owner_and_member(self, client, seed):
        owner = await seed.user()
        member = await seed.user()
        todo_list = await seed.todo_list(owner.id)
        await seed.member(todo_list.id, owner.id, member.id, approved=False)

        for user in (owner, member):
            response = await client.get(f"/v1/todo-lists/{todo_list.id}", headers=user.headers)
            assert response.status_code == 200
            assert response.json()["name"] == todo_list.name

    @pytest.mark.asyncio
    async def test_missing_and_unshared_lists_look_the_same(self, client, seed):
        owner = await seed.user()
        stranger = await seed.user()
        invited = await seed.user()
        todo_list = await seed.todo_list(owner.id)
        await seed.invitation(todo_list.id, owner.id, invited.id)

        missing = await client.get(f"/v1/todo-lists/{uuid.uuid4()}", headers=stranger.headers)
        unshared = await client.get(f"/v1/todo-lists/{todo_list.id}", headers=stranger.headers)
        pending = await client.get(f"/v1/todo-lists/{todo_list.id}", headers=invited.headers)

        assert missing.status_code == unshared.status_code == pending.status_code == 404
        assert missing.json() == unshared.json() == pending.json()

    @pytest.mark.asyncio
    async def test_malformed_list_id(self, client, seed):
        owner = await seed.user()
        response = await client.get("/v1/todo-lists/not-a-uuid", headers=owner.headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_archive_is_owner_only(self, client, seed):
        owner = await seed.user()
        member = await seed.user()
        todo_list = await seed.todo_list(owner.id)
        await seed.member(todo_list.id, owner.id, member.id)

        response = await client.post(
            f"/v1/todo-lists/{todo_list.id}/archive", headers=member.headers
        )
        assert response.status_code == 404
        assert (await seed.get(TodoList, todo_list.id)).is_archived is False

        response = await client.post(
            f"/v1/todo-lists/{todo_list.id}/archive", headers=owner.headers
        )
        assert response.status_code == 200
        assert response.json()["is_archived"] is True
        assert (await seed.get(TodoList, todo_list.id)).is_archived is True
