from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

class ItemCreate(BaseModel):
    content: str = Field(..., min_length=1)

class ItemUpdate(BaseModel):
    content: str = Field(..., min_length=1)

class ItemRead(BaseModel):
    id: UUID
    list_id: UUID
    content: str
    is_completed: bool
    completed_at: Optional[datetime] = None
    completed_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
