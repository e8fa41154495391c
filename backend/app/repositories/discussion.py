"""
Discussion Repository - Database operations for item discussions and messages.
"""

import uuid
from typing import List, Optional, Tuple

from sqlalchemy import select

from app.models.discussion import Discussion, Message

from .base import BaseRepository


class DiscussionRepository(BaseRepository[Discussion]):
    """Repository for Discussion entities."""

    model = Discussion

    async def find_by_item(self, item_id: uuid.UUID) -> Optional[Discussion]:
        return await self.find_one(select(Discussion).where(Discussion.item_id == item_id))


class MessageRepository(BaseRepository[Message]):
    """Repository for Message entities."""

    model = Message

    async def list_by_discussion(
        self, discussion_id: uuid.UUID, offset: int = 0, limit: int = 20
    ) -> Tuple[List[Message], int]:
        return await self.paginate(
            select(Message)
            .where(Message.discussion_id == discussion_id)
            .order_by(Message.created_at),
            offset=offset,
            limit=limit,
        )
