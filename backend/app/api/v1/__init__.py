from app.api.v1.todo_list import router as todo_list_router
from app.api.v1.item import router as item_router
from app.api.v1.discussion import router as discussion_router
from app.api.v1.message import router as message_router
from app.api.v1.invitation import router as invitation_router
from app.api.v1.user import router as user_router

__all__ = [
    "todo_list_router",
    "item_router",
    "discussion_router",
    "message_router",
    "invitation_router",
    "user_router"
    ]
