"""initial schema: users, activation codes, revoked sessions, categories, expenses

Revision ID: 3f9a1c2e7b10
Revises:
Create Date: 2026-10-18 10:12:41.208315

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c2e7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - create auth and budgeting tables."""
    op.create_table(
        "app_user",
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("validated", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("email"),
    )
    op.create_table(
        "activation_code",
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("expiration_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("attempts", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("email"),
        sa.ForeignKeyConstraint(["email"], ["app_user.email"], ondelete="CASCADE"),
        sa.CheckConstraint("length(code) = 6", name="ck_activation_code_length"),
        sa.CheckConstraint("attempts >= 0", name="ck_activation_code_attempts"),
    )
    op.create_table(
        "revoked_session",
        sa.Column("session_id", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("session_id"),
    )
    op.create_index("ix_revoked_session_expires_at", "revoked_session", ["expires_at"])

    op.create_table(
        "category",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_email", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("parent_id", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_email"], ["app_user.email"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["category.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_category_user_email", "category", ["user_email"])
    op.create_index(
        "uq_category_root_name",
        "category",
        ["user_email", "name"],
        unique=True,
        postgresql_where=sa.text("parent_id IS NULL"),
    )
    op.create_index(
        "uq_category_child_name",
        "category",
        ["user_email", "parent_id", "name"],
        unique=True,
        postgresql_where=sa.text("parent_id IS NOT NULL"),
    )

    op.create_table(
        "expense",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_email", sa.String(length=100), nullable=False),
        sa.Column("amount", sa.Numeric(precision=9, scale=2), nullable=False),
        sa.Column("category_id", sa.String(), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_email"], ["app_user.email"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["category.id"], ondelete="CASCADE"),
        sa.CheckConstraint("amount > 0", name="ck_expense_amount_positive"),
    )
    op.create_index("ix_expense_user_email", "expense", ["user_email"])
    op.create_index("ix_expense_category_id", "expense", ["category_id"])


def downgrade() -> None:
    """Downgrade schema - drop all tables."""
    op.drop_index("ix_expense_category_id", "expense")
    op.drop_index("ix_expense_user_email", "expense")
    op.drop_table("expense")
    op.drop_index("uq_category_child_name", "category")
    op.drop_index("uq_category_root_name", "category")
    op.drop_index("ix_category_user_email", "category")
    op.drop_table("category")
    op.drop_index("ix_revoked_session_expires_at", "revoked_session")
    op.drop_table("revoked_session")
    op.drop_table("activation_code")
    op.drop_table("app_user")
