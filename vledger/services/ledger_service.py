"""
Ledger service: the engine's public surface.

One object per unit of work, built over a single database
session, exposing every operation a presentation layer needs.
It owns no logic of its own: each call is delegated to the
component responsible for it.
"""

from decimal import Decimal

from sqlalchemy.orm import Session

from vledger.models.account import Account
from vledger.models.enums import TransactionStatus
from vledger.models.transaction import Transaction
from vledger.schemas.account import AccountCreate, AccountUpdate
from vledger.schemas.report import GeneralLedgerLine, TrialBalanceReport
from vledger.schemas.transaction import TransactionCreate
from vledger.services.account_registry import AccountRegistry
from vledger.services.balance_calculator import BalanceCalculator
from vledger.services.reports import GeneralLedgerQuery, TrialBalanceReporter
from vledger.services.transaction_ledger import TransactionLedger


class LedgerService:

    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountRegistry(db)
        self.transactions = TransactionLedger(db)
        self.balances = BalanceCalculator(db)
        self.trial_balance = TrialBalanceReporter(db)
        self.general_ledger = GeneralLedgerQuery(db)

    # --- Accounts ---

    def create_account(self, request: AccountCreate) -> Account:
        return self.accounts.create_account(request)

    def get_account(self, account_id: int) -> Account:
        return self.accounts.require_by_id(account_id)

    def get_account_by_code(self, code: str) -> Account:
        return self.accounts.require_by_code(code)

    def get_all_accounts(self) -> list[Account]:
        """Active accounts in code order."""
        return self.accounts.list_active()

    def update_account(self, account_id: int, request: AccountUpdate) -> Account:
        return self.accounts.update_account(account_id, request)

    def get_account_balance(self, code: str) -> Decimal:
        return self.balances.get_account_balance(code)

    # --- Transactions ---

    def create_transaction(self, request: TransactionCreate) -> Transaction:
        return self.transactions.create_transaction(request)

    def get_transaction(self, transaction_id: int) -> Transaction:
        return self.transactions.get_transaction(transaction_id)

    def get_all_transactions(
        self, status: TransactionStatus | None = None
    ) -> list[Transaction]:
        return self.transactions.list_transactions(status)

    def post_transaction(self, transaction_id: int) -> Transaction:
        return self.transactions.post_transaction(transaction_id)

    def cancel_transaction(self, transaction_id: int) -> Transaction:
        return self.transactions.cancel_transaction(transaction_id)

    # --- Reports ---

    def get_trial_balance(self) -> TrialBalanceReport:
        return self.trial_balance.get_trial_balance_report()

    def get_general_ledger(
        self, account_code: str | None = None
    ) -> list[GeneralLedgerLine]:
        return self.general_ledger.get_general_ledger(account_code)
