"""
Balance calculator.

Balances are never stored; they are always derived from the
journal. Only entries of POSTED transactions count; PENDING
and CANCELLED transactions are economically inert.

For ASSET and EXPENSE accounts:  balance = debits - credits
For LIABILITY, EQUITY, REVENUE:  balance = credits - debits
"""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from vledger.exceptions import NotFoundError
from vledger.models.account import Account
from vledger.models.enums import AccountType, TransactionStatus
from vledger.models.journal_entry import JournalEntry
from vledger.models.transaction import Transaction
from vledger.money import money_sum

NORMAL_DEBIT_TYPES = frozenset({AccountType.ASSET, AccountType.EXPENSE})


def is_debit_normal(account_type: AccountType) -> bool:
    """True if debits increase this type of account."""
    return account_type in NORMAL_DEBIT_TYPES


class BalanceCalculator:

    def __init__(self, db: Session):
        self.db = db

    def get_account_balance(self, code: str) -> Decimal:
        """
        Calculate an account's balance by code.

        Raises NotFoundError if no account has this code.
        """
        account = self.db.execute(
            select(Account).where(Account.code == code)
        ).scalar_one_or_none()
        if account is None:
            raise NotFoundError(f"Account with code {code} not found")
        return self.balance_for(account)

    def balance_for(self, account: Account) -> Decimal:
        # Summed as Decimal here; SQLite aggregates Numeric as REAL
        total_debits = money_sum(
            self._posted_amounts(JournalEntry.debit_account_id == account.id)
        )
        total_credits = money_sum(
            self._posted_amounts(JournalEntry.credit_account_id == account.id)
        )

        if is_debit_normal(account.account_type):
            return total_debits - total_credits
        return total_credits - total_debits

    def _posted_amounts(self, side_clause) -> list[Decimal]:
        return list(
            self.db.execute(
                select(JournalEntry.amount)
                .join(Transaction, JournalEntry.transaction_id == Transaction.id)
                .where(
                    side_clause,
                    Transaction.status == TransactionStatus.POSTED,
                )
            ).scalars()
        )
