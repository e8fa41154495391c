"""create users, todo lists, items, invitations, codes, discussions and messages

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "todo_lists",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("owner_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("is_archived", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_todo_lists_owner_id", "todo_lists", ["owner_id"])

    op.create_table(
        "todo_items",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("list_id", sa.Uuid(), sa.ForeignKey("todo_lists.id"), nullable=False),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_todo_items_list_id", "todo_items", ["list_id"])

    op.create_table(
        "todo_invitations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("list_id", sa.Uuid(), sa.ForeignKey("todo_lists.id"), nullable=False),
        sa.Column("inviter_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("invitee_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("approved", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_todo_invitations_list_id", "todo_invitations", ["list_id"])
    op.create_index("ix_todo_invitations_invitee_id", "todo_invitations", ["invitee_id"])

    op.create_table(
        "todo_invitation_codes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("list_id", sa.Uuid(), sa.ForeignKey("todo_lists.id"), nullable=False),
        sa.Column("inviter_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("auto_approve", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_todo_invitation_codes_list_id", "todo_invitation_codes", ["list_id"])

    op.create_table(
        "todo_discussions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("item_id", sa.Uuid(), sa.ForeignKey("todo_items.id"), nullable=False, unique=True),
        *_timestamps(),
    )

    op.create_table(
        "todo_messages",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("discussion_id", sa.Uuid(), sa.ForeignKey("todo_discussions.id"), nullable=False),
        sa.Column("sender_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("content", sa.String(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_todo_messages_discussion_id", "todo_messages", ["discussion_id"])


def downgrade():
    op.drop_table("todo_messages")
    op.drop_table("todo_discussions")
    op.drop_table("todo_invitation_codes")
    op.drop_table("todo_invitations")
    op.drop_table("todo_items")
    op.drop_table("todo_lists")
    op.drop_table("users")
