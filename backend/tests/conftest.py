import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database.connection import get_db
from app.main import app
from app.models.base import Base
from app.models.discussion import Discussion, Message
from app.models.invitation import Invitation, InvitationCode, InvitationStatus
from app.models.item import Item
from app.models.todo_list import TodoList
from app.models.user import User
from app.services.auth import create_auth_token
from app.services.invitations import InvitationLifecycle


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class SeededUser:
    def __init__(self, id: uuid.UUID, token: str):
        self.id = id
        self.token = token

    @property
    def headers(self) -> dict:
        return auth(self.token)


class Seeder:
    """Writes fixture rows, each helper in its own committed session."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def _save(self, obj):
        async with self.session_factory() as session:
            session.add(obj)
            await session.commit()
            await session.refresh(obj)
            return obj

    async def user(self, username: str | None = None) -> SeededUser:
        username = username or f"user-{uuid.uuid4().hex[:8]}"
        user = await self._save(
            User(
                username=username,
                email=f"{username}@example.org",
                hashed_password="not-a-real-hash",
            )
        )
        return SeededUser(user.id, create_auth_token({"sub": str(user.id)}))

    async def todo_list(self, owner_id, name="Test List", archived=False) -> TodoList:
        async with self.session_factory() as session:
            todo_list = await InvitationLifecycle(session).create_list(owner_id, name)
            if archived:
                todo_list.is_archived = True
                await session.commit()
            return todo_list

    async def invitation(
        self,
        list_id,
        inviter_id,
        invitee_id,
        status=InvitationStatus.PENDING,
        approved=True,
    ) -> Invitation:
        return await self._save(
            Invitation(
                list_id=list_id,
                inviter_id=inviter_id,
                invitee_id=invitee_id,
                status=status.value,
                approved=approved,
            )
        )

    async def member(self, list_id, owner_id, member_id, approved=True) -> Invitation:
        return await self.invitation(
            list_id, owner_id, member_id, status=InvitationStatus.ACCEPTED, approved=approved
        )

    async def code(self, list_id, inviter_id, auto_approve=False, expires_in=timedelta(hours=24)) -> InvitationCode:
        return await self._save(
            InvitationCode(
                list_id=list_id,
                inviter_id=inviter_id,
                auto_approve=auto_approve,
                expires_at=datetime.now(timezone.utc) + expires_in,
            )
        )

    async def item(self, list_id, content="Buy eggs") -> Item:
        return await self._save(Item(list_id=list_id, content=content, is_completed=False))

    async def discussion(self, item_id) -> Discussion:
        return await self._save(Discussion(item_id=item_id))

    async def message(self, discussion_id, sender_id, content="Hello") -> Message:
        return await self._save(
            Message(discussion_id=discussion_id, sender_id=sender_id, content=content)
        )

    async def get(self, model, id):
        async with self.session_factory() as session:
            return await session.get(model, id)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def seed(session_factory):
    return Seeder(session_factory)


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
