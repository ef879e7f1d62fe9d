"""create ledger_entry

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from online_wallet.models.ledger import LedgerAmount


revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "ledger_entry",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sequence", sa.Integer(), nullable=False),
        sa.Column("balance_before", LedgerAmount(), nullable=False),
        sa.Column("amount", LedgerAmount(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_ledger_entry_sequence"), "ledger_entry", ["sequence"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_ledger_entry_sequence"), table_name="ledger_entry")
    op.drop_table("ledger_entry")
