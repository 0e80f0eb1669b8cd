"""
Transaction model.

A transaction groups the journal entries of one business event
(a sale, a rent payment...) under a human-facing reference.
It is created PENDING and moves exactly once, to POSTED or to
CANCELLED. Only entries of POSTED transactions count towards
balances.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Numeric, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vledger.models.base import Base, utcnow
from vledger.models.enums import TransactionStatus


# Valid state transitions, the source of truth for the state machine
VALID_TRANSITIONS: dict[TransactionStatus, set[TransactionStatus]] = {
    TransactionStatus.PENDING: {
        TransactionStatus.POSTED,
        TransactionStatus.CANCELLED,
    },
    TransactionStatus.POSTED: set(),
    TransactionStatus.CANCELLED: set(),
}


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    reference: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True
    )
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    # Total of the debit side, equal to the total of the credit side
    amount: Mapped[Decimal] = mapped_column(Numeric(19, 4), nullable=False)
    status: Mapped[TransactionStatus] = mapped_column(
        SAEnum(
            TransactionStatus,
            name="transaction_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=TransactionStatus.PENDING,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )
    posted_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    cancelled_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True
    )

    entries: Mapped[list["JournalEntry"]] = relationship(
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="JournalEntry.id",
    )

    def can_transition_to(self, new_status: TransactionStatus) -> bool:
        """Check if a state transition is valid."""
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.reference} "
            f"{self.amount} ({self.status.value})>"
        )
