from sqlalchemy import Column, String, Boolean, ForeignKey, Uuid
from app.models.base import Base, TimestampMixin
import uuid

class TodoList(TimestampMixin, Base):
    __tablename__ = "todo_lists"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    location = Column(String, nullable=True)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    is_archived = Column(Boolean, default=False, nullable=False)
