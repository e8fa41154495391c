from datetime import timedelta

import pytest

from app.services.auth import create_auth_token


async def register(client, username="alice", email="alice@example.com", password="secret123"):
    return await client.post(
        "/v1/users/register",
        json={"username": username, "email": email, "password": password},
    )


class TestUsersApi:

    @pytest.mark.asyncio
    async def test_register_login_me(self, client):
        response = await register(client)
        assert response.status_code == 200
        user = response.json()
        assert user["username"] == "alice"
        assert "hashed_password" not in user

        response = await client.post(
            "/v1/users/login", json={"username": "alice", "password": "secret123"}
        )
        assert response.status_code == 200
        token = response.json()["auth_token"]
        assert response.json()["token_type"] == "bearer"

        response = await client.get("/v1/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["id"] == user["id"]

    @pytest.mark.asyncio
    async def test_duplicate_registration(self, client):
        assert (await register(client)).status_code == 200
        assert (await register(client, email="other@example.com")).status_code == 400
        assert (await register(client, username="bob")).status_code == 400

    @pytest.mark.asyncio
    async def test_short_password(self, client):
        response = await register(client, password="123")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_bad_credentials(self, client):
        await register(client)
        response = await client.post(
            "/v1/users/login", json={"username": "alice", "password": "wrong-password"}
        )
        assert response.status_code == 401

        response = await client.post(
            "/v1/users/login", json={"username": "nobody", "password": "secret123"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_expired_and_foreign_tokens(self, client, seed):
        user = await seed.user()

        expired = create_auth_token({"sub": str(user.id)}, expires_delta=timedelta(minutes=-1))
        response = await client.get("/v1/users/me", headers={"Authorization": f"Bearer {expired}"})
        assert response.status_code == 401

        response = await client.get(
            "/v1/users/me", headers={"Authorization": "Bearer abc.def.ghi"}
        )
        assert response.status_code == 401

        bad_subject = create_auth_token({"sub": "not-a-uuid"})
        response = await client.get(
            "/v1/todo-lists", headers={"Authorization": f"Bearer {bad_subject}"}
        )
        assert response.status_code == 401


class TestServiceRoutes:

    @pytest.mark.asyncio
    async def test_healthcheck(self, client):
        response = await client.get("/healthcheck")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
