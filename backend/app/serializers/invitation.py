from pydantic import BaseModel
from datetime import datetime
from uuid import UUID

class InvitationCreate(BaseModel):
    invitee_id: UUID

class InvitationRead(BaseModel):
    id: UUID
    list_id: UUID
    inviter_id: UUID
    invitee_id: UUID
    status: str
    approved: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class InvitationCodeCreate(BaseModel):
    auto_approve: bool

class InvitationCodeRead(BaseModel):
    id: UUID
    list_id: UUID
    inviter_id: UUID
    expires_at: datetime
    auto_approve: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
