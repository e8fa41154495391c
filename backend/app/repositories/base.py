"""
Base repository - shared async SQLAlchemy operations.
"""

import uuid
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic repository over one mapped table."""

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, id: uuid.UUID) -> Optional[ModelT]:
        return await self.db.get(self.model, id)

    async def find_one(self, stmt: Select) -> Optional[ModelT]:
        return await self.db.scalar(stmt.limit(1))

    async def find_many(self, stmt: Select) -> List[ModelT]:
        result = await self.db.scalars(stmt)
        return list(result.all())

    async def paginate(
        self, stmt: Select, offset: int = 0, limit: int = 20
    ) -> Tuple[List[ModelT], int]:
        """Return one page of ``stmt`` plus the unpaginated row count."""
        total = await self.db.scalar(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        )
        items = await self.find_many(stmt.offset(offset).limit(limit))
        return items, total or 0

    def add(self, obj: ModelT) -> ModelT:
        self.db.add(obj)
        return obj

    async def update_fields(self, id: uuid.UUID, *criteria, **values) -> Optional[ModelT]:
        """
        Issue a field-level UPDATE and return the fresh row.

        Only the named columns are written, so concurrent updates touching
        other columns of the same row are not overwritten. Extra ``criteria``
        narrow the WHERE clause; when they exclude the row nothing is
        written, and the current row is still returned.
        """
        await self.db.execute(
            update(self.model)
            .where(self.model.id == id, *criteria)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return await self.db.get(self.model, id, populate_existing=True)
