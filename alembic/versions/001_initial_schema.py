"""Initial schema - permission_override.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # One row per (scope_type, scope_id, user_id); absence means "defer to the next tier".
    op.create_table(
        "permission_override",
        sa.Column("scope_type", sa.String(16), nullable=False),
        sa.Column("scope_id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("level", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("assigned_by", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("scope_type", "scope_id", "user_id"),
        sa.CheckConstraint(
            "scope_type IN ('SPACE', 'FOLDER', 'LIST')",
            name="ck_permission_override_scope_type",
        ),
    )
    op.create_index("ix_permission_override_user_id", "permission_override", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_permission_override_user_id", table_name="permission_override")
    op.drop_table("permission_override")
