"""
Invitation Repository - Database operations for list invitations and codes.
"""

import uuid
from typing import List, Optional, Tuple

from sqlalchemy import select

from app.models.invitation import Invitation, InvitationCode, InvitationStatus

from .base import BaseRepository

ACTIVE_STATUSES = (InvitationStatus.PENDING.value, InvitationStatus.ACCEPTED.value)


class InvitationRepository(BaseRepository[Invitation]):
    """Repository for Invitation entities."""

    model = Invitation

    async def find_accepted_membership(
        self, list_id: uuid.UUID, user_id: uuid.UUID, approved_only: bool = False
    ) -> Optional[Invitation]:
        """Accepted invitation of ``user_id`` into ``list_id``, approved rows first."""
        stmt = select(Invitation).where(
            Invitation.list_id == list_id,
            Invitation.invitee_id == user_id,
            Invitation.status == InvitationStatus.ACCEPTED.value,
        )
        if approved_only:
            stmt = stmt.where(Invitation.approved.is_(True))
        return await self.find_one(stmt.order_by(Invitation.approved.desc()))

    async def find_active_for_invitee(
        self, list_id: uuid.UUID, invitee_id: uuid.UUID
    ) -> Optional[Invitation]:
        """A pending or accepted invitation for the pair, if any."""
        return await self.find_one(
            select(Invitation).where(
                Invitation.list_id == list_id,
                Invitation.invitee_id == invitee_id,
                Invitation.status.in_(ACTIVE_STATUSES),
            )
        )

    async def find_by_invitee_and_status(
        self,
        invitee_id: uuid.UUID,
        status: InvitationStatus,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[Invitation], int]:
        return await self.paginate(
            select(Invitation)
            .where(
                Invitation.invitee_id == invitee_id,
                Invitation.status == status.value,
            )
            .order_by(Invitation.created_at.desc()),
            offset=offset,
            limit=limit,
        )

    async def list_by_list(
        self, list_id: uuid.UUID, offset: int = 0, limit: int = 20
    ) -> Tuple[List[Invitation], int]:
        return await self.paginate(
            select(Invitation)
            .where(Invitation.list_id == list_id)
            .order_by(Invitation.created_at.desc()),
            offset=offset,
            limit=limit,
        )

    async def set_status(
        self,
        invitation_id: uuid.UUID,
        status: InvitationStatus,
        from_status: InvitationStatus = InvitationStatus.PENDING,
    ) -> Optional[Invitation]:
        """Move ``status`` only if the row is still in ``from_status``."""
        return await self.update_fields(
            invitation_id,
            Invitation.status == from_status.value,
            status=status.value,
        )

    async def approve(self, invitation_id: uuid.UUID) -> Optional[Invitation]:
        """Set ``approved``. Never written back to False anywhere."""
        return await self.update_fields(
            invitation_id,
            Invitation.approved.is_(False),
            approved=True,
        )


class InvitationCodeRepository(BaseRepository[InvitationCode]):
    """Repository for InvitationCode entities."""

    model = InvitationCode

    async def find_for_list(
        self, list_id: uuid.UUID, code_id: uuid.UUID
    ) -> Optional[InvitationCode]:
        return await self.find_one(
            select(InvitationCode).where(
                InvitationCode.id == code_id,
                InvitationCode.list_id == list_id,
            )
        )

    async def list_by_list(
        self, list_id: uuid.UUID, offset: int = 0, limit: int = 20
    ) -> Tuple[List[InvitationCode], int]:
        return await self.paginate(
            select(InvitationCode)
            .where(InvitationCode.list_id == list_id)
            .order_by(InvitationCode.created_at.desc()),
            offset=offset,
            limit=limit,
        )
