"""Business logic services."""

from vledger.services.account_registry import AccountRegistry
from vledger.services.transaction_ledger import TransactionLedger
from vledger.services.balance_calculator import BalanceCalculator
from vledger.services.reports import TrialBalanceReporter, GeneralLedgerQuery
from vledger.services.ledger_service import LedgerService

__all__ = [
    "AccountRegistry",
    "TransactionLedger",
    "BalanceCalculator",
    "TrialBalanceReporter",
    "GeneralLedgerQuery",
    "LedgerService",
]
