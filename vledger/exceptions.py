"""
Typed exceptions for the ledger engine.

Every error carries a machine-readable ``code`` so callers
(the API layer in particular) branch on the type or code,
never on message text.

    LedgerError
    +-- ValidationError
    |   +-- UnbalancedTransactionError
    |   +-- InactiveAccountError
    |   +-- AccountHasBalanceError
    +-- UnknownAccountError
    +-- DuplicateCodeError
    +-- DuplicateReferenceError
    +-- NotFoundError
    +-- InvalidStatusTransitionError
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base class for all ledger errors."""

    code: str = "LEDGER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(LedgerError):
    """Input was rejected before anything was written."""

    code = "VALIDATION_ERROR"


class UnbalancedTransactionError(ValidationError):
    code = "UNBALANCED_TRANSACTION"

    def __init__(self, total_debits: Decimal, total_credits: Decimal):
        self.total_debits = total_debits
        self.total_credits = total_credits
        super().__init__(
            f"Transaction does not balance: "
            f"debits={total_debits}, credits={total_credits}"
        )


class InactiveAccountError(ValidationError):
    code = "ACCOUNT_INACTIVE"

    def __init__(self, account_code: str):
        self.account_code = account_code
        super().__init__(f"Account {account_code} is not active")


class AccountHasBalanceError(ValidationError):
    """An account with a non-zero posted balance cannot be deactivated."""

    code = "ACCOUNT_HAS_BALANCE"

    def __init__(self, account_code: str, balance: Decimal):
        self.account_code = account_code
        self.balance = balance
        super().__init__(
            f"Account {account_code} has balance {balance} and cannot be deactivated"
        )


class UnknownAccountError(LedgerError):
    """A transaction referenced an account code that does not exist."""

    code = "UNKNOWN_ACCOUNT"

    def __init__(self, account_codes: list[str]):
        self.account_codes = account_codes
        super().__init__(
            f"Accounts not found: {', '.join(account_codes)}"
        )


class DuplicateCodeError(LedgerError):
    code = "DUPLICATE_ACCOUNT_CODE"

    def __init__(self, account_code: str):
        self.account_code = account_code
        super().__init__(f"Account with code '{account_code}' already exists")


class DuplicateReferenceError(LedgerError):
    code = "DUPLICATE_REFERENCE"

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Transaction with reference '{reference}' already exists")


class NotFoundError(LedgerError):
    code = "NOT_FOUND"


class InvalidStatusTransitionError(LedgerError):
    code = "INVALID_STATUS_TRANSITION"

    def __init__(self, transaction_id: int, current: str, requested: str):
        self.transaction_id = transaction_id
        self.current_status = current
        self.requested_status = requested
        super().__init__(
            f"Cannot transition transaction {transaction_id} "
            f"from {current} to {requested}"
        )
