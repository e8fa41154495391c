"""
Invitation Lifecycle - state changes on invitations, invitation codes and
the owner membership created with every list.

Callers are expected to have passed the matching access guard first
(``app.services.access``); this module enforces the data-level rules:

    direct invitation   -> (pending,  approved=True)
    code join           -> (accepted, approved=code.auto_approve)
    owner self-invite   -> (accepted, approved=True)

    pending -> accepted | rejected      invitee only
    approved False -> True              list owner only, never reversed
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import utcnow
from app.models.invitation import Invitation, InvitationCode, InvitationStatus
from app.models.todo_list import TodoList
from app.repositories.invitation import InvitationCodeRepository, InvitationRepository
from app.repositories.todo_list import TodoListRepository
from app.repositories.user import UserRepository
from app.services.exceptions import BadRequestError, NotFoundError
from app.services.utils import is_expired

logger = logging.getLogger(__name__)

INVITATION_CODE_TTL = timedelta(hours=24)


class InvitationLifecycle:
    """Service for creating and transitioning list invitations."""

    def __init__(self, db: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock
        self.repo = InvitationRepository(db)
        self.code_repo = InvitationCodeRepository(db)
        self.list_repo = TodoListRepository(db)
        self.user_repo = UserRepository(db)

    def create_owner_self_invitation(self, list_id: uuid.UUID, owner_id: uuid.UUID) -> Invitation:
        """Stage the owner's membership row. Committed by the caller."""
        return self.repo.add(
            Invitation(
                list_id=list_id,
                inviter_id=owner_id,
                invitee_id=owner_id,
                status=InvitationStatus.ACCEPTED.value,
                approved=True,
            )
        )

    async def create_list(
        self, owner_id: uuid.UUID, name: str, location: Optional[str] = None
    ) -> TodoList:
        """
        Create a list and its owner membership in one transaction.

        Either both rows are committed or neither is, so an owner never ends
        up without a membership record.
        """
        todo_list = self.list_repo.add(
            TodoList(
                id=uuid.uuid4(),
                name=name,
                location=location,
                owner_id=owner_id,
                is_archived=False,
            )
        )
        self.create_owner_self_invitation(todo_list.id, owner_id)

        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(todo_list)
        logger.info(f"Created list {todo_list.id} for owner {owner_id}")
        return todo_list

    async def _ensure_no_active_invitation(self, list_id: uuid.UUID, invitee_id: uuid.UUID) -> None:
        existing = await self.repo.find_active_for_invitee(list_id, invitee_id)
        if existing:
            raise BadRequestError("Active invitation already exists for this user")

    async def create_direct_invitation(
        self, list_id: uuid.UUID, inviter_id: uuid.UUID, invitee_id: uuid.UUID
    ) -> Invitation:
        if not await self.user_repo.find_by_id(invitee_id):
            raise NotFoundError("User not found")

        await self._ensure_no_active_invitation(list_id, invitee_id)

        invitation = self.repo.add(
            Invitation(
                list_id=list_id,
                inviter_id=inviter_id,
                invitee_id=invitee_id,
                status=InvitationStatus.PENDING.value,
                approved=True,
            )
        )
        await self.db.commit()
        await self.db.refresh(invitation)

        logger.info(f"Created invitation {invitation.id} on list {list_id} for user {invitee_id}")
        return invitation

    async def create_invitation_code(
        self, list_id: uuid.UUID, inviter_id: uuid.UUID, auto_approve: bool
    ) -> InvitationCode:
        code = self.code_repo.add(
            InvitationCode(
                list_id=list_id,
                inviter_id=inviter_id,
                expires_at=self.clock() + INVITATION_CODE_TTL,
                auto_approve=auto_approve,
            )
        )
        await self.db.commit()
        await self.db.refresh(code)

        logger.info(f"Created invitation code {code.id} on list {list_id} (auto_approve={auto_approve})")
        return code

    async def join_by_invitation_code(
        self, list_id: uuid.UUID, code_id: uuid.UUID, invitee_id: uuid.UUID
    ) -> Invitation:
        """
        Consume an invitation code.

        The resulting invitation is accepted straight away; approval comes
        from the code. Checks run in order: unknown list or code is
        NotFound (one outcome for both), expired is BadRequest, and an
        existing active invitation is BadRequest.
        """
        code = await self.code_repo.find_for_list(list_id, code_id)
        if not code:
            raise NotFoundError("Invitation code not found")

        if is_expired(code.expires_at, self.clock()):
            raise BadRequestError("Invitation code has expired")

        await self._ensure_no_active_invitation(list_id, invitee_id)

        invitation = self.repo.add(
            Invitation(
                list_id=list_id,
                inviter_id=code.inviter_id,
                invitee_id=invitee_id,
                status=InvitationStatus.ACCEPTED.value,
                approved=code.auto_approve,
            )
        )
        await self.db.commit()
        await self.db.refresh(invitation)

        logger.info(f"User {invitee_id} joined list {list_id} with code {code_id}")
        return invitation

    async def _transition(
        self, invitation_id: uuid.UUID, caller_id: uuid.UUID, target: InvitationStatus
    ) -> Invitation:
        invitation = await self.repo.find_by_id(invitation_id)
        if not invitation or invitation.invitee_id != caller_id:
            raise NotFoundError("Invitation not found")

        updated = await self.repo.set_status(invitation_id, target)
        await self.db.commit()

        if updated is None:
            raise NotFoundError("Invitation not found")
        if updated.status != target.value:
            raise BadRequestError(f"Invitation is already {updated.status}")

        logger.info(f"Invitation {invitation_id} {target.value} by user {caller_id}")
        return updated

    async def accept_invitation(self, invitation_id: uuid.UUID, caller_id: uuid.UUID) -> Invitation:
        return await self._transition(invitation_id, caller_id, InvitationStatus.ACCEPTED)

    async def reject_invitation(self, invitation_id: uuid.UUID, caller_id: uuid.UUID) -> Invitation:
        return await self._transition(invitation_id, caller_id, InvitationStatus.REJECTED)

    async def approve_invitation(self, invitation_id: uuid.UUID, caller_id: uuid.UUID) -> Invitation:
        """Approve an invitation. Approving twice is a no-op."""
        invitation = await self.repo.find_by_id(invitation_id)
        todo_list = await self.list_repo.find_by_id(invitation.list_id) if invitation else None
        if not todo_list or todo_list.owner_id != caller_id:
            raise NotFoundError("Invitation not found")

        updated = await self.repo.approve(invitation_id)
        await self.db.commit()

        logger.info(f"Invitation {invitation_id} approved by owner {caller_id}")
        return updated
