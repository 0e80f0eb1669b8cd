"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from vledger.models.base import Base
from vledger.models.enums import AccountType, TransactionStatus
from vledger.models.account import Account
from vledger.models.transaction import Transaction, VALID_TRANSITIONS
from vledger.models.journal_entry import JournalEntry

__all__ = [
    "Base",
    "AccountType",
    "TransactionStatus",
    "Account",
    "Transaction",
    "VALID_TRANSITIONS",
    "JournalEntry",
]
