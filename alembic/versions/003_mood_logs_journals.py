"""Add mood_logs and journals.

Revision ID: 003
Revises: 002
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "mood_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("mood", sa.String(64), nullable=False),
        sa.Column("intensity", sa.Integer(), nullable=False, server_default=sa.text("5")),
        sa.Column("note", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_mood_logs_user_id"), "mood_logs", ["user_id"], unique=False)

    op.create_table(
        "journals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False, server_default="Untitled"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("mood", sa.String(64), nullable=False, server_default="neutral"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_journals_user_id"), "journals", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_journals_user_id"), table_name="journals")
    op.drop_table("journals")
    op.drop_index(op.f("ix_mood_logs_user_id"), table_name="mood_logs")
    op.drop_table("mood_logs")
