"""
Shared enumerations for database models.

Python enums mapped to database enums ensure that only valid
values can be stored: a bad account_type or status is caught
by the database, not just by Python validation.
"""

import enum


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class TransactionStatus(str, enum.Enum):
    """Lifecycle of a transaction. POSTED and CANCELLED are terminal."""
    PENDING = "PENDING"
    POSTED = "POSTED"
    CANCELLED = "CANCELLED"
