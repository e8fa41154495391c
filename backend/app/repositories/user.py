"""
User Repository - Database operations for users.
"""

from typing import Optional

from sqlalchemy import select

from app.models.user import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entities."""

    model = User

    async def find_by_username(self, username: str) -> Optional[User]:
        return await self.find_one(select(User).where(User.username == username))

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self.find_one(select(User).where(User.email == email))
