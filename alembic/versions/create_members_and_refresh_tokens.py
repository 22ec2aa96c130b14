"""create members and refresh_tokens

Revision ID: 3c1f9a7d2b10
Revises:
Create Date: 2026-10-18 10:12:41.512034

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


member_status = sa.Enum("ACTIVE", "INACTIVE", "SUSPENDED", "BANNED", name="member_status")
member_role = sa.Enum("USER", "ADMIN", "BOSS", name="member_role")


def upgrade():
    op.create_table(
        "members",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("login_handle", sa.String(length=20), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("display_name", sa.String(length=100), nullable=False),
        sa.Column("nickname", sa.String(length=50), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("status", member_status, nullable=False),
        sa.Column("role", member_role, nullable=False),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("password_changed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_members_login_handle", "members", ["login_handle"], unique=True)
    op.create_index("ix_members_email", "members", ["email"], unique=True)
    op.create_index("ix_members_nickname", "members", ["nickname"], unique=True)

    op.create_table(
        "refresh_tokens",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("member_id", sa.Integer(), sa.ForeignKey("members.id", ondelete="CASCADE"), nullable=False),
        sa.Column("token", sa.String(length=512), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_refresh_tokens_member_id", "refresh_tokens", ["member_id"], unique=True)


def downgrade():
    op.drop_index("ix_refresh_tokens_member_id", table_name="refresh_tokens")
    op.drop_table("refresh_tokens")
    op.drop_index("ix_members_nickname", table_name="members")
    op.drop_index("ix_members_email", table_name="members")
    op.drop_index("ix_members_login_handle", table_name="members")
    op.drop_table("members")
    member_role.drop(op.get_bind(), checkfirst=True)
    member_status.drop(op.get_bind(), checkfirst=True)
