"""
Item Repository - Database operations for todo items.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select

from app.models.item import Item

from .base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Repository for Item entities."""

    model = Item

    async def find_in_list(self, list_id: uuid.UUID, item_id: uuid.UUID) -> Optional[Item]:
        return await self.find_one(
            select(Item).where(Item.id == item_id, Item.list_id == list_id)
        )

    async def list_by_list(self, list_id: uuid.UUID) -> List[Item]:
        return await self.find_many(
            select(Item).where(Item.list_id == list_id).order_by(Item.created_at)
        )

    async def update_content(self, item_id: uuid.UUID, content: str) -> Optional[Item]:
        return await self.update_fields(item_id, content=content)

    async def set_completed(
        self,
        item_id: uuid.UUID,
        completed_by: Optional[uuid.UUID],
        completed_at: Optional[datetime],
    ) -> Optional[Item]:
        return await self.update_fields(
            item_id,
            is_completed=completed_by is not None,
            completed_at=completed_at,
            completed_by=completed_by,
        )
