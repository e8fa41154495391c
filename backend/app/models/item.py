from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid
from app.models.base import Base, TimestampMixin
import uuid

class Item(TimestampMixin, Base):
    __tablename__ = "todo_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    list_id = Column(Uuid, ForeignKey("todo_lists.id"), nullable=False, index=True)
    content = Column(String, nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    completed_by = Column(Uuid, ForeignKey("users.id"), nullable=True)
