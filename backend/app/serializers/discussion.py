from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID

class DiscussionRead(BaseModel):
    id: UUID
    item_id: UUID
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class MessageCreate(BaseModel):
    content: str = Field(..., min_length=1)

class MessageRead(BaseModel):
    id: UUID
    discussion_id: UUID
    sender_id: UUID
    content: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
