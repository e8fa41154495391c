"""
Access Evaluator - decides what a caller may do with a shared list.

Every guard either returns the resolved context or raises ``NotFoundError``.
Lack of permission and absence share the same outcome, so a caller without
access cannot tell whether the target exists. Authentication happens before
any of this runs (see ``app.services.auth``).

Decision table for a (user, list) pair::

    VIEW / MUTATE   owner, or accepted invitation
    DISCUSS         owner, or accepted AND approved invitation
    OWNER_ONLY      owner

Item writes additionally require the list not to be archived, checked only
after the capability passed.
"""

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.discussion import Discussion
from app.models.invitation import Invitation
from app.models.item import Item
from app.models.todo_list import TodoList
from app.repositories.discussion import DiscussionRepository
from app.repositories.invitation import InvitationRepository
from app.repositories.item import ItemRepository
from app.repositories.todo_list import TodoListRepository
from app.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    VIEW = "view"
    MUTATE = "mutate"
    DISCUSS = "discuss"
    OWNER_ONLY = "owner_only"


@dataclass(frozen=True)
class ListAccess:
    """Resolved relationship between one user and one list."""

    todo_list: TodoList
    user_id: uuid.UUID
    is_owner: bool
    is_member: bool
    is_approved_member: bool

    def allows(self, capability: Capability) -> bool:
        if self.is_owner:
            return True
        if capability in (Capability.VIEW, Capability.MUTATE):
            return self.is_member
        if capability == Capability.DISCUSS:
            return self.is_member and self.is_approved_member
        return False


async def resolve_list_access(
    db: AsyncSession, user_id: uuid.UUID, list_id: uuid.UUID
) -> Optional[ListAccess]:
    todo_list = await TodoListRepository(db).find_by_id(list_id)
    if todo_list is None:
        return None

    # approved rows sort first, so one lookup answers both flags
    membership = await InvitationRepository(db).find_accepted_membership(list_id, user_id)
    return ListAccess(
        todo_list=todo_list,
        user_id=user_id,
        is_owner=todo_list.owner_id == user_id,
        is_member=membership is not None,
        is_approved_member=membership is not None and membership.approved,
    )


async def require_list(
    db: AsyncSession,
    user_id: uuid.UUID,
    list_id: uuid.UUID,
    capability: Capability,
    writable: bool = False,
    not_found: str = "List not found",
) -> ListAccess:
    """
    Guard a list-level operation.

    ``writable`` adds the archived-list lock. It is evaluated after the
    capability so a non-member on an archived list still sees the plain
    not-found outcome.
    """
    access = await resolve_list_access(db, user_id, list_id)
    if access is None or not access.allows(capability):
        logger.debug(f"Denied {capability.value} on list {list_id} for user {user_id}")
        raise NotFoundError(not_found)

    if writable and access.todo_list.is_archived:
        logger.debug(f"List {list_id} is archived, refusing write by user {user_id}")
        raise NotFoundError(not_found)

    return access


async def require_item(
    db: AsyncSession,
    user_id: uuid.UUID,
    list_id: uuid.UUID,
    item_id: uuid.UUID,
    capability: Capability = Capability.VIEW,
    writable: bool = False,
) -> Tuple[ListAccess, Item]:
    """Guard an item by its owning list; the item must belong to that list."""
    access = await require_list(
        db, user_id, list_id, capability, writable=writable, not_found="Item not found"
    )
    item = await ItemRepository(db).find_in_list(list_id, item_id)
    if item is None:
        raise NotFoundError("Item not found")
    return access, item


async def require_discussion(
    db: AsyncSession, user_id: uuid.UUID, discussion_id: uuid.UUID
) -> Tuple[ListAccess, Discussion]:
    """Guard a discussion through discussion -> item -> list."""
    discussion = await DiscussionRepository(db).find_by_id(discussion_id)
    item = await ItemRepository(db).find_by_id(discussion.item_id) if discussion else None
    if item is None:
        raise NotFoundError("Discussion not found")

    access = await require_list(
        db, user_id, item.list_id, Capability.DISCUSS, not_found="Discussion not found"
    )
    return access, discussion


async def require_invitation_participant(
    db: AsyncSession, user_id: uuid.UUID, invitation_id: uuid.UUID
) -> Invitation:
    """Inviter or invitee may read an invitation."""
    invitation = await InvitationRepository(db).find_by_id(invitation_id)
    if invitation is None or user_id not in (invitation.inviter_id, invitation.invitee_id):
        raise NotFoundError("Invitation not found")
    return invitation


async def require_invitee(
    db: AsyncSession, user_id: uuid.UUID, invitation_id: uuid.UUID
) -> Invitation:
    """Only the invitee may accept or reject, whatever ``approved`` says."""
    invitation = await InvitationRepository(db).find_by_id(invitation_id)
    if invitation is None or invitation.invitee_id != user_id:
        raise NotFoundError("Invitation not found")
    return invitation


async def require_invitation_approver(
    db: AsyncSession, user_id: uuid.UUID, invitation_id: uuid.UUID
) -> Invitation:
    """Only the owner of the invitation's list may approve it."""
    invitation = await InvitationRepository(db).find_by_id(invitation_id)
    if invitation is None:
        raise NotFoundError("Invitation not found")

    todo_list = await TodoListRepository(db).find_by_id(invitation.list_id)
    if todo_list is None or todo_list.owner_id != user_id:
        raise NotFoundError("Invitation not found")
    return invitation
