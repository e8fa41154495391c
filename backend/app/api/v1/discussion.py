from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging

from app.database.connection import get_db
from app.models.discussion import Discussion
from app.repositories.discussion import DiscussionRepository, MessageRepository
from app.serializers.common import Page
from app.serializers.discussion import DiscussionRead, MessageRead
from app.services.access import Capability, require_discussion, require_item
from app.services.auth import get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todo-lists", tags=["Todo Lists Discussions"])

@router.get("/{list_id}/items/{item_id}/discussion", response_model=DiscussionRead)
async def get_or_create_discussion(
    list_id: UUID,
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    """Get the item's discussion, creating it on first access."""
    await require_item(db, user_id, list_id, item_id, Capability.DISCUSS)

    repo = DiscussionRepository(db)
    discussion = await repo.find_by_item(item_id)
    if discussion:
        return discussion

    discussion = repo.add(Discussion(item_id=item_id))
    try:
        await db.commit()
    except IntegrityError:
        # another request created it first; rollback expires loaded rows
        await db.rollback()
        return await repo.find_by_item(item_id)

    await db.refresh(discussion)
    logger.info(f"Created discussion {discussion.id} for item {item_id}")
    return discussion

@router.get("/discussions/{discussion_id}/messages", response_model=Page[MessageRead])
async def list_messages(
    discussion_id: UUID,
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    _, discussion = await require_discussion(db, user_id, discussion_id)
    messages, total = await MessageRepository(db).list_by_discussion(
        discussion.id, offset=offset, limit=limit
    )
    return Page[MessageRead](
        items=[MessageRead.model_validate(m) for m in messages],
        total=total,
        offset=offset,
        limit=limit,
    )
