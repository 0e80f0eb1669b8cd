"""
Pydantic schemas for the read-side reports.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from vledger.models.enums import TransactionStatus
from vledger.schemas.account import AccountSummary


class TrialBalanceRow(BaseModel):
    account: AccountSummary
    balance: Decimal
    debit: Decimal
    credit: Decimal


class TrialBalanceReport(BaseModel):
    rows: list[TrialBalanceRow]
    total_debit: Decimal
    total_credit: Decimal
    is_balanced: bool


class GeneralLedgerLine(BaseModel):
    """A journal entry joined with its transaction and accounts."""
    id: int
    transaction_id: int
    reference: str
    date: datetime
    status: TransactionStatus
    description: str
    debit_account: AccountSummary | None
    credit_account: AccountSummary | None
    amount: Decimal
