"""create bills

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "3f1c9a7d2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "bills",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, server_default=""),
        sa.Column("type", sa.String(100), nullable=False, server_default=""),
        sa.Column("name", sa.Text, nullable=False, server_default=""),
        sa.Column("amount", sa.Float, nullable=True),
        sa.Column("date", sa.String(10), nullable=False, server_default=""),
        sa.Column("vat", sa.String(20), nullable=False, server_default=""),
        sa.Column("pct", sa.Integer, nullable=False, server_default="20"),
        sa.Column("commentary", sa.Text, nullable=False, server_default=""),
        sa.Column("file_url", sa.Text, nullable=True),
        sa.Column("file_name", sa.Text, nullable=True),
        sa.Column("file_key", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=True),
        sa.Column("comment_admin", sa.Text, nullable=False, server_default=""),
        sa.Column(
            "created_at",
            sa.DateTime,
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime,
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
    )
    op.create_index("ix_bills_email", "bills", ["email"])


def downgrade() -> None:
    op.drop_index("ix_bills_email", table_name="bills")
    op.drop_table("bills")
