"""
Read-side reports: trial balance and general ledger.

Both are computed from the persisted journal on every call.
Nothing here writes to the database.
"""

from sqlalchemy import or_, select
from sqlalchemy.orm import Session, aliased, contains_eager

from vledger.models.account import Account
from vledger.models.journal_entry import JournalEntry
from vledger.models.transaction import Transaction
from vledger.money import ZERO, money_sum
from vledger.schemas.account import AccountSummary
from vledger.schemas.report import (
    GeneralLedgerLine,
    TrialBalanceReport,
    TrialBalanceRow,
)
from vledger.services.account_registry import AccountRegistry
from vledger.services.balance_calculator import BalanceCalculator, is_debit_normal


class TrialBalanceReporter:
    """
    Lists every active account's balance in debit/credit columns.

    A balance on the account's normal side goes in that column.
    An abnormal balance (an overdrawn cash account, say) goes in
    the opposite column as a positive figure, so the two column
    totals stay equal for any set of balanced posted
    transactions.
    """

    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountRegistry(db)
        self.balances = BalanceCalculator(db)

    def get_trial_balance(self) -> list[TrialBalanceRow]:
        rows = []
        for account in self.accounts.list_active():
            balance = self.balances.balance_for(account)
            debit = credit = ZERO
            if balance != ZERO:
                on_debit_side = is_debit_normal(account.account_type) == (balance > 0)
                if on_debit_side:
                    debit = abs(balance)
                else:
                    credit = abs(balance)
            rows.append(TrialBalanceRow(
                account=AccountSummary.model_validate(account),
                balance=balance,
                debit=debit,
                credit=credit,
            ))
        return rows

    def get_trial_balance_report(self) -> TrialBalanceReport:
        rows = self.get_trial_balance()
        total_debit = money_sum(r.debit for r in rows)
        total_credit = money_sum(r.credit for r in rows)
        return TrialBalanceReport(
            rows=rows,
            total_debit=total_debit,
            total_credit=total_credit,
            is_balanced=total_debit == total_credit,
        )


class GeneralLedgerQuery:

    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountRegistry(db)

    def get_general_ledger(
        self, account_code: str | None = None
    ) -> list[GeneralLedgerLine]:
        """
        Journal entries in the order they were written.

        With an account code, only entries debiting or crediting
        that account. Raises NotFoundError for an unknown code.
        Entries of every status are listed; the status is on
        each line.
        """
        debit_account = aliased(Account)
        credit_account = aliased(Account)

        query = (
            select(JournalEntry)
            .join(JournalEntry.transaction)
            .outerjoin(JournalEntry.debit_account.of_type(debit_account))
            .outerjoin(JournalEntry.credit_account.of_type(credit_account))
            .options(
                contains_eager(JournalEntry.transaction),
                contains_eager(JournalEntry.debit_account.of_type(debit_account)),
                contains_eager(JournalEntry.credit_account.of_type(credit_account)),
            )
            # ids are assigned in insertion order
            .order_by(JournalEntry.id.asc())
        )

        if account_code is not None:
            account = self.accounts.require_by_code(account_code)
            query = query.where(or_(
                JournalEntry.debit_account_id == account.id,
                JournalEntry.credit_account_id == account.id,
            ))

        entries = self.db.execute(query).unique().scalars().all()
        return [self._to_line(entry) for entry in entries]

    @staticmethod
    def _to_line(entry: JournalEntry) -> GeneralLedgerLine:
        txn: Transaction = entry.transaction
        return GeneralLedgerLine(
            id=entry.id,
            transaction_id=txn.id,
            reference=txn.reference,
            date=txn.date,
            status=txn.status,
            description=entry.description or txn.description,
            debit_account=(
                AccountSummary.model_validate(entry.debit_account)
                if entry.debit_account else None
            ),
            credit_account=(
                AccountSummary.model_validate(entry.credit_account)
                if entry.credit_account else None
            ),
            amount=entry.amount,
        )
