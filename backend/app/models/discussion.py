from sqlalchemy import Column, String, ForeignKey, Uuid
from app.models.base import Base, TimestampMixin
import uuid

class Discussion(TimestampMixin, Base):
    __tablename__ = "todo_discussions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    item_id = Column(Uuid, ForeignKey("todo_items.id"), nullable=False, unique=True)


class Message(TimestampMixin, Base):
    __tablename__ = "todo_messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    discussion_id = Column(Uuid, ForeignKey("todo_discussions.id"), nullable=False, index=True)
    sender_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    content = Column(String, nullable=False)
