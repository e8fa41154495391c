from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.database.connection import get_db
from app.models.invitation import InvitationStatus
from app.repositories.invitation import InvitationCodeRepository, InvitationRepository
from app.serializers.common import Page
from app.serializers.invitation import (
    InvitationCodeCreate,
    InvitationCodeRead,
    InvitationCreate,
    InvitationRead,
)
from app.services.access import (
    Capability,
    require_invitation_approver,
    require_invitation_participant,
    require_invitee,
    require_list,
)
from app.services.auth import get_current_user_id
from app.services.invitations import InvitationLifecycle

router = APIRouter(prefix="/todo-lists", tags=["Todo Lists Invitations"])


def _invitation_page(invitations, total, offset, limit):
    return Page[InvitationRead](
        items=[InvitationRead.model_validate(i) for i in invitations],
        total=total,
        offset=offset,
        limit=limit,
    )

@router.get("/invitations/my/pending", response_model=Page[InvitationRead])
async def list_my_pending_invitations(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    invitations, total = await InvitationRepository(db).find_by_invitee_and_status(
        user_id, InvitationStatus.PENDING, offset=offset, limit=limit
    )
    return _invitation_page(invitations, total, offset, limit)

@router.get("/invitations/my/accepted", response_model=Page[InvitationRead])
async def list_my_accepted_invitations(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    """Lists the current user has joined, as their accepted invitations."""
    invitations, total = await InvitationRepository(db).find_by_invitee_and_status(
        user_id, InvitationStatus.ACCEPTED, offset=offset, limit=limit
    )
    return _invitation_page(invitations, total, offset, limit)

@router.get("/invitations/{invitation_id}", response_model=InvitationRead)
async def get_invitation(
    invitation_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    return await require_invitation_participant(db, user_id, invitation_id)

@router.get("/{list_id}/invitations", response_model=Page[InvitationRead])
async def list_list_invitations(
    list_id: UUID,
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_list(db, user_id, list_id, Capability.OWNER_ONLY)
    invitations, total = await InvitationRepository(db).list_by_list(
        list_id, offset=offset, limit=limit
    )
    return _invitation_page(invitations, total, offset, limit)

@router.get("/{list_id}/invitations/codes", response_model=Page[InvitationCodeRead])
async def list_invitation_codes(
    list_id: UUID,
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_list(db, user_id, list_id, Capability.OWNER_ONLY)
    codes, total = await InvitationCodeRepository(db).list_by_list(
        list_id, offset=offset, limit=limit
    )
    return Page[InvitationCodeRead](
        items=[InvitationCodeRead.model_validate(c) for c in codes],
        total=total,
        offset=offset,
        limit=limit,
    )

@router.post("/{list_id}/invitations", response_model=InvitationRead)
async def create_invitation(
    list_id: UUID,
    payload: InvitationCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    """Invite a user directly. The invitation starts pending and approved."""
    await require_list(db, user_id, list_id, Capability.OWNER_ONLY)
    return await InvitationLifecycle(db).create_direct_invitation(
        list_id, user_id, payload.invitee_id
    )

@router.post("/{list_id}/invitations/codes", response_model=InvitationCodeRead)
async def create_invitation_code(
    list_id: UUID,
    payload: InvitationCodeCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    """Generate a join code valid for 24 hours."""
    await require_list(db, user_id, list_id, Capability.OWNER_ONLY)
    return await InvitationLifecycle(db).create_invitation_code(
        list_id, user_id, payload.auto_approve
    )

@router.post("/{list_id}/invitations/codes/{code_id}", response_model=InvitationRead)
async def join_by_invitation_code(
    list_id: UUID,
    code_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    return await InvitationLifecycle(db).join_by_invitation_code(list_id, code_id, user_id)

@router.patch("/invitations/{invitation_id}/accept", response_model=InvitationRead)
async def accept_invitation(
    invitation_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_invitee(db, user_id, invitation_id)
    return await InvitationLifecycle(db).accept_invitation(invitation_id, user_id)

@router.patch("/invitations/{invitation_id}/reject", response_model=InvitationRead)
async def reject_invitation(
    invitation_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_invitee(db, user_id, invitation_id)
    return await InvitationLifecycle(db).reject_invitation(invitation_id, user_id)

@router.patch("/invitations/{invitation_id}/approve", response_model=InvitationRead)
async def approve_invitation(
    invitation_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id)
):
    await require_invitation_approver(db, user_id, invitation_id)
    return await InvitationLifecycle(db).approve_invitation(invitation_id, user_id)
