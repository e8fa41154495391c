from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging

from app.database.connection import get_db
from app.repositories.todo_list import TodoListRepository
from app.serializers.common import Page
from app.serializers.todo_list import TodoListCreate, TodoListRead
from app.services.access import Capability, require_list
from app.services.auth import get_current_user_id
from app.services.invitations import InvitationLifecycle

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todo-lists", tags=["Todo Lists"])


async def _owned_lists(db, user_id, archived, offset, limit):
    lists, total = await TodoListRepository(db).list_by_owner(
        user_id, archived=archived, offset=offset, limit=limit
    )
    return Page[TodoListRead](
        items=[TodoListRead.model_validate(l) for l in lists],
        total=total,
        offset=offset,
        limit=limit,
    )

@router.get("", response_model=Page[TodoListRead])
async def list_active_lists(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    """Active lists owned by the current user."""
    return await _owned_lists(db, user_id, False, offset, limit)

@router.get("/archived", response_model=Page[TodoListRead])
async def list_archived_lists(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    return await _owned_lists(db, user_id, True, offset, limit)

@router.get("/{list_id}", response_model=TodoListRead)
async def get_list(
    list_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    access = await require_list(db, user_id, list_id, Capability.VIEW)
    return access.todo_list

@router.post("", response_model=TodoListRead)
async def create_list(
    payload: TodoListCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    """
    Create a list. The owner's accepted, approved membership is written in
    the same transaction.
    """
    return await InvitationLifecycle(db).create_list(user_id, payload.name, payload.location)

@router.post("/{list_id}/archive", response_model=TodoListRead)
async def archive_list(
    list_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_list(db, user_id, list_id, Capability.OWNER_ONLY)
    todo_list = await TodoListRepository(db).archive(list_id)
    await db.commit()
    logger.info(f"List {list_id} archived by owner {user_id}")
    return todo_list
