"""create raffle tables

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


def upgrade() -> None:
    op.create_table(
        "storage_entries",
        sa.Column("key", sa.LargeBinary(length=255), nullable=False),
        sa.Column("value", sa.LargeBinary(), nullable=False),
        sa.PrimaryKeyConstraint("key", name="storage_entries_pkey"),
    )
    op.create_table(
        "raffles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("prefix", sa.LargeBinary(length=64), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False),
        sa.Column("length", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "length >= 0 AND length <= size", name="raffles_length_range"
        ),
        sa.PrimaryKeyConstraint("id", name="raffles_pkey"),
        sa.UniqueConstraint("prefix", name="raffles_prefix_key"),
    )


def downgrade() -> None:
    op.drop_table("raffles")
    op.drop_table("storage_entries")
