"""
Todo List Repository - Database operations for lists.
"""

import uuid
from typing import List, Optional, Tuple

from sqlalchemy import select

from app.models.todo_list import TodoList

from .base import BaseRepository


class TodoListRepository(BaseRepository[TodoList]):
    """Repository for TodoList entities."""

    model = TodoList

    async def list_by_owner(
        self,
        owner_id: uuid.UUID,
        archived: bool = False,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[TodoList], int]:
        return await self.paginate(
            select(TodoList)
            .where(TodoList.owner_id == owner_id, TodoList.is_archived.is_(archived))
            .order_by(TodoList.created_at.desc()),
            offset=offset,
            limit=limit,
        )

    async def archive(self, list_id: uuid.UUID) -> Optional[TodoList]:
        return await self.update_fields(list_id, is_archived=True)
