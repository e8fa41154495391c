from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

class TodoListCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)

class TodoListRead(BaseModel):
    id: UUID
    name: str
    location: Optional[str] = None
    owner_id: UUID
    is_archived: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
