"""
Journal entry model.

Each entry is one line of a transaction: an amount on exactly
one side (debit or credit) of exactly one account. Entries are
immutable once written.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vledger.models.base import Base, utcnow


class JournalEntry(Base):
    """
    A single debit or credit line.

    Within a transaction, the sum of debit lines equals the sum
    of credit lines. That invariant is enforced by the
    TransactionLedger; the table only guarantees the shape of
    each row.
    """

    __tablename__ = "journal_entries"
    __table_args__ = (
        CheckConstraint(
            "(debit_account_id IS NULL) <> (credit_account_id IS NULL)",
            name="ck_journal_entries_one_side",
        ),
        CheckConstraint("amount > 0", name="ck_journal_entries_positive_amount"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    transaction_id: Mapped[int] = mapped_column(
        ForeignKey("transactions.id"), nullable=False, index=True
    )
    debit_account_id: Mapped[int | None] = mapped_column(
        ForeignKey("accounts.id"), nullable=True, index=True
    )
    credit_account_id: Mapped[int | None] = mapped_column(
        ForeignKey("accounts.id"), nullable=True, index=True
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(19, 4), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )

    transaction: Mapped["Transaction"] = relationship(back_populates="entries")
    debit_account: Mapped["Account | None"] = relationship(
        back_populates="debit_entries",
        foreign_keys=[debit_account_id],
    )
    credit_account: Mapped["Account | None"] = relationship(
        back_populates="credit_entries",
        foreign_keys=[credit_account_id],
    )

    @property
    def is_debit(self) -> bool:
        return self.debit_account_id is not None

    def __repr__(self) -> str:
        side = "DEBIT" if self.is_debit else "CREDIT"
        return f"<JournalEntry {side} {self.amount}>"
