"""initial_admin_management_schema

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-19 09:12:41.508113

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_JSON = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "admin_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("email_normalized", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("company", sa.String(length=255), nullable=True),
        sa.Column("department", sa.String(length=255), nullable=True),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("job_title", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=64), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_admin_user_email_normalized", "admin_user", ["email_normalized"], unique=True
    )
    op.create_index("ix_admin_user_created_at_id", "admin_user", ["created_at", "id"])

    op.create_table(
        "admin_user_permission",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("admin_user_id", sa.String(), nullable=False),
        sa.Column("permission", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["admin_user_id"], ["admin_user.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("admin_user_id", "permission", name="uq_admin_user_permission"),
    )
    op.create_index(
        "ix_admin_user_permission_admin_user_id", "admin_user_permission", ["admin_user_id"]
    )

    op.create_table(
        "verification_code",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code_hash", sa.String(length=64), nullable=False),
        sa.Column("admin_user_id", sa.String(), nullable=False),
        sa.Column("purpose", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("consumed_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["admin_user_id"], ["admin_user.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_verification_code_code_hash", "verification_code", ["code_hash"], unique=True
    )
    op.create_index(
        "ix_verification_code_owner_purpose",
        "verification_code",
        ["admin_user_id", "purpose"],
    )

    op.create_table(
        "suggested_value",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("value", sa.String(length=255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("type", "value", name="uq_suggested_value_type_value"),
    )
    op.create_index("ix_suggested_value_type", "suggested_value", ["type"])

    op.create_table(
        "admin_audit_log",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("admin_user_id", sa.String(), nullable=False),
        sa.Column("action", sa.String(length=32), nullable=False),
        sa.Column("entity_data", _JSON, nullable=False),
        sa.Column("metadata", _JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["admin_user_id"], ["admin_user.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_admin_audit_log_admin_user_id", "admin_audit_log", ["admin_user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_admin_audit_log_admin_user_id", table_name="admin_audit_log")
    op.drop_table("admin_audit_log")
    op.drop_index("ix_suggested_value_type", table_name="suggested_value")
    op.drop_table("suggested_value")
    op.drop_index("ix_verification_code_owner_purpose", table_name="verification_code")
    op.drop_index("ix_verification_code_code_hash", table_name="verification_code")
    op.drop_table("verification_code")
    op.drop_index(
        "ix_admin_user_permission_admin_user_id", table_name="admin_user_permission"
    )
    op.drop_table("admin_user_permission")
    op.drop_index("ix_admin_user_created_at_id", table_name="admin_user")
    op.drop_index("ix_admin_user_email_normalized", table_name="admin_user")
    op.drop_table("admin_user")
