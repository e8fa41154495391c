"""Repository layer for database operations"""

from .base import BaseRepository
from .discussion import DiscussionRepository, MessageRepository
from .invitation import InvitationCodeRepository, InvitationRepository
from .item import ItemRepository
from .todo_list import TodoListRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "TodoListRepository",
    "ItemRepository",
    "InvitationRepository",
    "InvitationCodeRepository",
    "DiscussionRepository",
    "MessageRepository",
    "UserRepository",
]
