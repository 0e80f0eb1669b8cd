"""
Account registry: the chart of accounts.

Creates, looks up and updates accounts. Codes are unique and,
because accounts are deactivated rather than deleted, never
reused. An account's type decides its normal balance side,
so it is fixed once the account exists.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vledger.exceptions import (
    AccountHasBalanceError,
    DuplicateCodeError,
    NotFoundError,
)
from vledger.logging_config import get_logger
from vledger.models.account import Account
from vledger.money import ZERO
from vledger.schemas.account import AccountCreate, AccountUpdate
from vledger.services.balance_calculator import BalanceCalculator

logger = get_logger("services.account_registry")


class AccountRegistry:
    """
    Chart-of-accounts store.

    Like every service, it takes a database session and only
    flushes; the caller owns the commit.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_account(self, request: AccountCreate) -> Account:
        """
        Create a new account, active from the start.

        Raises DuplicateCodeError if the code already exists.
        """
        if self.get_by_code(request.code) is not None:
            raise DuplicateCodeError(request.code)

        account = Account(
            code=request.code,
            name=request.name,
            account_type=request.account_type,
            description=request.description,
            is_active=True,
        )
        # A savepoint keeps the caller's earlier work if the insert
        # loses a race with a concurrent insert of the same code
        savepoint = self.db.begin_nested()
        try:
            self.db.add(account)
            self.db.flush()
            savepoint.commit()
        except IntegrityError as e:
            savepoint.rollback()
            raise DuplicateCodeError(request.code) from e

        logger.info(
            "account_created",
            extra={
                "account_code": account.code,
                "account_type": account.account_type.value,
            },
        )
        return account

    def get_by_code(self, code: str) -> Account | None:
        return self.db.execute(
            select(Account).where(Account.code == code)
        ).scalar_one_or_none()

    def get_by_id(self, account_id: int) -> Account | None:
        return self.db.get(Account, account_id)

    def require_by_code(self, code: str) -> Account:
        account = self.get_by_code(code)
        if account is None:
            raise NotFoundError(f"Account with code {code} not found")
        return account

    def require_by_id(self, account_id: int) -> Account:
        account = self.get_by_id(account_id)
        if account is None:
            raise NotFoundError(f"Account {account_id} not found")
        return account

    def get_by_codes(self, codes: set[str]) -> dict[str, Account]:
        """Resolve many codes in one query. Missing codes are absent."""
        if not codes:
            return {}
        accounts = self.db.execute(
            select(Account).where(Account.code.in_(codes))
        ).scalars().all()
        return {a.code: a for a in accounts}

    def list_active(self) -> list[Account]:
        """Active accounts, ordered by code."""
        accounts = self.db.execute(
            select(Account)
            .where(Account.is_active.is_(True))
            .order_by(Account.code.asc())
        ).scalars().all()
        return list(accounts)

    def list_all(self) -> list[Account]:
        """All accounts including inactive ones, ordered by code."""
        accounts = self.db.execute(
            select(Account).order_by(Account.code.asc())
        ).scalars().all()
        return list(accounts)

    def update_account(self, account_id: int, request: AccountUpdate) -> Account:
        """
        Apply a partial update.

        Only fields explicitly sent are touched, so sending
        description=None clears it while omitting it keeps it.

        Raises AccountHasBalanceError when deactivating an
        account whose posted balance is not zero.
        """
        account = self.require_by_id(account_id)

        changes = request.model_dump(exclude_unset=True)
        if changes.get("name") is None:
            changes.pop("name", None)
        if changes.get("is_active") is None:
            changes.pop("is_active", None)

        if changes.get("is_active") is False and account.is_active:
            balance = BalanceCalculator(self.db).balance_for(account)
            if balance != ZERO:
                raise AccountHasBalanceError(account.code, balance)

        for field, value in changes.items():
            setattr(account, field, value)

        self.db.flush()
        logger.info(
            "account_updated",
            extra={"account_code": account.code, "fields": sorted(changes)},
        )
        return account
