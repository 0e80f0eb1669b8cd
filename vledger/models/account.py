"""
Account model (chart of accounts).

Every account in the ledger (cash, receivables, sales revenue,
rent expense...) is a row here. Journal entries are posted
against accounts by id; callers refer to them by code.
"""

from datetime import datetime

from sqlalchemy import String, Boolean, DateTime, Text, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vledger.models.base import Base, utcnow
from vledger.models.enums import AccountType


class Account(Base):
    """
    A single account in the chart of accounts.

    ``code`` and ``account_type`` are fixed at creation. An
    account is never deleted, only deactivated, so a code is
    never reused.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(AccountType, name="account_type_enum", create_constraint=True),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    debit_entries: Mapped[list["JournalEntry"]] = relationship(
        back_populates="debit_account",
        foreign_keys="JournalEntry.debit_account_id",
    )
    credit_entries: Mapped[list["JournalEntry"]] = relationship(
        back_populates="credit_account",
        foreign_keys="JournalEntry.credit_account_id",
    )

    def __repr__(self) -> str:
        return f"<Account {self.code} ({self.account_type.value})>"
