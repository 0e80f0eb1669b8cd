"""ledger schema: accounts, transactions, journal entries

Revision ID: 0001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

account_type_enum = sa.Enum(
    "ASSET", "LIABILITY", "EQUITY", "REVENUE", "EXPENSE",
    name="account_type_enum", create_constraint=True,
)
transaction_status_enum = sa.Enum(
    "PENDING", "POSTED", "CANCELLED",
    name="transaction_status_enum", create_constraint=True,
)


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("account_type", account_type_enum, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_accounts_code", "accounts", ["code"], unique=True)

    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("reference", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("status", transaction_status_enum, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("posted_at", sa.DateTime(), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(), nullable=True),
    )
    op.create_index(
        "ix_transactions_reference", "transactions", ["reference"], unique=True
    )
    op.create_index("ix_transactions_status", "transactions", ["status"])

    op.create_table(
        "journal_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "transaction_id", sa.Integer(),
            sa.ForeignKey("transactions.id"), nullable=False,
        ),
        sa.Column(
            "debit_account_id", sa.Integer(),
            sa.ForeignKey("accounts.id"), nullable=True,
        ),
        sa.Column(
            "credit_account_id", sa.Integer(),
            sa.ForeignKey("accounts.id"), nullable=True,
        ),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            "(debit_account_id IS NULL) <> (credit_account_id IS NULL)",
            name="ck_journal_entries_one_side",
        ),
        sa.CheckConstraint(
            "amount > 0", name="ck_journal_entries_positive_amount"
        ),
    )
    op.create_index(
        "ix_journal_entries_transaction_id", "journal_entries", ["transaction_id"]
    )
    op.create_index(
        "ix_journal_entries_debit_account_id", "journal_entries", ["debit_account_id"]
    )
    op.create_index(
        "ix_journal_entries_credit_account_id", "journal_entries", ["credit_account_id"]
    )


def downgrade() -> None:
    op.drop_table("journal_entries")
    op.drop_table("transactions")
    op.drop_table("accounts")
    transaction_status_enum.drop(op.get_bind(), checkfirst=True)
    account_type_enum.drop(op.get_bind(), checkfirst=True)
