from app.models.base import Base
from app.models.user import User
from app.models.todo_list import TodoList
from app.models.item import Item
from app.models.invitation import Invitation, InvitationCode, InvitationStatus
from app.models.discussion import Discussion, Message

__all__ = [
    "Base",
    "User",
    "TodoList",
    "Item",
    "Invitation",
    "InvitationCode",
    "InvitationStatus",
    "Discussion",
    "Message",
    ]
