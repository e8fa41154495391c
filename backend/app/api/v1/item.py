from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from uuid import UUID
import logging

from app.database.connection import get_db
from app.models.base import utcnow
from app.models.item import Item
from app.repositories.item import ItemRepository
from app.serializers.item import ItemCreate, ItemRead, ItemUpdate
from app.services.access import Capability, require_item, require_list
from app.services.auth import get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todo-lists/{list_id}/items", tags=["Todo Lists Items"])

@router.get("", response_model=List[ItemRead])
async def list_items(
    list_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_list(db, user_id, list_id, Capability.VIEW)
    return await ItemRepository(db).list_by_list(list_id)

@router.get("/{item_id}", response_model=ItemRead)
async def get_item(
    list_id: UUID,
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    _, item = await require_item(db, user_id, list_id, item_id)
    return item

@router.post("", response_model=ItemRead)
async def create_item(
    list_id: UUID,
    payload: ItemCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_list(db, user_id, list_id, Capability.MUTATE, writable=True)

    item = ItemRepository(db).add(
        Item(list_id=list_id, content=payload.content, is_completed=False)
    )
    await db.commit()
    await db.refresh(item)
    return item

@router.patch("/{item_id}", response_model=ItemRead)
async def update_item_content(
    list_id: UUID,
    item_id: UUID,
    payload: ItemUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_item(db, user_id, list_id, item_id, Capability.MUTATE, writable=True)
    item = await ItemRepository(db).update_content(item_id, payload.content)
    await db.commit()
    return item

@router.post("/{item_id}/complete", response_model=ItemRead)
async def complete_item(
    list_id: UUID,
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_item(db, user_id, list_id, item_id, Capability.MUTATE, writable=True)
    item = await ItemRepository(db).set_completed(item_id, completed_by=user_id, completed_at=utcnow())
    await db.commit()
    return item

@router.post("/{item_id}/uncomplete", response_model=ItemRead)
async def uncomplete_item(
    list_id: UUID,
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_item(db, user_id, list_id, item_id, Capability.MUTATE, writable=True)
    item = await ItemRepository(db).set_completed(item_id, completed_by=None, completed_at=None)
    await db.commit()
    return item
