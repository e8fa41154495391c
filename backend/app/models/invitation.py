from enum import Enum
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid
from app.models.base import Base, TimestampMixin
import uuid


class InvitationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Invitation(TimestampMixin, Base):
    """
    Membership grant of a user into a list's collaborator set.

    Only ``status`` and ``approved`` change after creation. The list owner
    holds a self-invitation (inviter == invitee, accepted, approved).
    """
    __tablename__ = "todo_invitations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    list_id = Column(Uuid, ForeignKey("todo_lists.id"), nullable=False, index=True)
    inviter_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    invitee_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(20), default=InvitationStatus.PENDING.value, nullable=False)
    approved = Column(Boolean, default=False, nullable=False)


class InvitationCode(TimestampMixin, Base):
    __tablename__ = "todo_invitation_codes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    list_id = Column(Uuid, ForeignKey("todo_lists.id"), nullable=False, index=True)
    inviter_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    auto_approve = Column(Boolean, default=False, nullable=False)
