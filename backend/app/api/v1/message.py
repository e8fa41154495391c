from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.database.connection import get_db
from app.models.discussion import Message
from app.repositories.discussion import MessageRepository
from app.serializers.discussion import MessageCreate, MessageRead
from app.services.access import require_discussion
from app.services.auth import get_current_user_id

router = APIRouter(prefix="/todo-lists/discussions", tags=["Todo Lists Messages"])

@router.post("/{discussion_id}/messages", response_model=MessageRead)
async def create_message(
    discussion_id: UUID,
    payload: MessageCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    _, discussion = await require_discussion(db, user_id, discussion_id)

    message = MessageRepository(db).add(
        Message(discussion_id=discussion.id, sender_id=user_id, content=payload.content)
    )
    await db.commit()
    await db.refresh(message)
    return message
