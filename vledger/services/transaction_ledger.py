"""
Transaction ledger, the write side of the engine.

This service enforces the fundamental rules:
1. Every referenced account exists and is active
2. Every transaction balances (debits = credits, exactly)
3. References are unique
4. A transaction and its journal entries are written together
5. Status moves once, from PENDING to POSTED or CANCELLED

No other service writes journal entries.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from vledger.exceptions import (
    DuplicateReferenceError,
    InactiveAccountError,
    InvalidStatusTransitionError,
    NotFoundError,
    UnbalancedTransactionError,
    UnknownAccountError,
    ValidationError,
)
from vledger.logging_config import get_logger
from vledger.models.account import Account
from vledger.models.base import utcnow
from vledger.models.enums import TransactionStatus
from vledger.models.journal_entry import JournalEntry
from vledger.models.transaction import Transaction
from vledger.money import MAX_AMOUNT, money_sum
from vledger.schemas.transaction import TransactionCreate
from vledger.services.account_registry import AccountRegistry

logger = get_logger("services.transaction_ledger")


class TransactionLedger:
    """
    All journal writes pass through this service.

    The service takes a database session as a constructor
    argument. The caller controls the transaction boundary:
    it commits after a successful call and rolls back after a
    failed one.
    """

    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountRegistry(db)

    def create_transaction(self, request: TransactionCreate) -> Transaction:
        """
        Record a balanced transaction in PENDING status.

        This is the most critical method in the entire system.
        Every check runs before anything is added to the
        session, so a rejected transaction leaves no rows
        behind. On success the transaction and all its entries
        are flushed together. The write happens inside a
        savepoint: if the database refuses it, only this
        transaction is undone and the caller's earlier work in
        the session is kept.
        """
        try:
            accounts_by_code = self._resolve_accounts(request)

            # --- Enforce balance rule ---
            total_debits = money_sum(e.amount for e in request.entries if e.is_debit)
            total_credits = money_sum(
                e.amount for e in request.entries if not e.is_debit
            )
            if total_debits != total_credits:
                raise UnbalancedTransactionError(total_debits, total_credits)
            if total_debits > MAX_AMOUNT:
                raise ValidationError(
                    f"Transaction total {total_debits} exceeds the largest "
                    f"storable amount {MAX_AMOUNT}"
                )

            existing = self.db.execute(
                select(Transaction.id).where(
                    Transaction.reference == request.reference
                )
            ).scalar_one_or_none()
            if existing is not None:
                raise DuplicateReferenceError(request.reference)
        except (ValidationError, UnknownAccountError, DuplicateReferenceError) as e:
            logger.warning(
                "transaction_rejected",
                extra={"reference": request.reference, "reason": e.code},
            )
            raise

        # --- Write transaction and entries as one unit ---
        txn = Transaction(
            reference=request.reference,
            description=request.description,
            date=request.date,
            amount=total_debits,
            status=TransactionStatus.PENDING,
        )
        for entry_data in request.entries:
            account = accounts_by_code[entry_data.account_code]
            txn.entries.append(JournalEntry(
                debit_account_id=account.id if entry_data.is_debit else None,
                credit_account_id=None if entry_data.is_debit else account.id,
                amount=entry_data.amount,
                description=entry_data.description,
            ))
        savepoint = self.db.begin_nested()
        try:
            self.db.add(txn)
            self.db.flush()
            savepoint.commit()
        except IntegrityError as e:
            savepoint.rollback()
            logger.warning(
                "transaction_rejected",
                extra={"reference": request.reference, "reason": "CONSTRAINT"},
            )
            if "reference" in str(e.orig).lower():
                raise DuplicateReferenceError(request.reference) from e
            raise ValidationError(
                f"Transaction {request.reference} violates a ledger constraint"
            ) from e

        logger.info(
            "transaction_created",
            extra={
                "transaction_id": txn.id,
                "reference": txn.reference,
                "amount": txn.amount,
                "entry_count": len(txn.entries),
            },
        )
        return txn

    def _resolve_accounts(
        self, request: TransactionCreate
    ) -> dict[str, Account]:
        """Resolve every account code, in one query."""
        codes = {e.account_code for e in request.entries}
        accounts_by_code = self.accounts.get_by_codes(codes)

        missing = sorted(codes - set(accounts_by_code))
        if missing:
            raise UnknownAccountError(missing)

        for code in sorted(accounts_by_code):
            if not accounts_by_code[code].is_active:
                raise InactiveAccountError(code)

        return accounts_by_code

    def post_transaction(self, transaction_id: int) -> Transaction:
        """Move a PENDING transaction to POSTED; its entries start counting."""
        txn = self._transition(transaction_id, TransactionStatus.POSTED)
        txn.posted_at = utcnow()
        self.db.flush()
        logger.info(
            "transaction_posted",
            extra={"transaction_id": txn.id, "reference": txn.reference},
        )
        return txn

    def cancel_transaction(self, transaction_id: int) -> Transaction:
        """Move a PENDING transaction to CANCELLED; its entries never count."""
        txn = self._transition(transaction_id, TransactionStatus.CANCELLED)
        txn.cancelled_at = utcnow()
        self.db.flush()
        logger.info(
            "transaction_cancelled",
            extra={"transaction_id": txn.id, "reference": txn.reference},
        )
        return txn

    def _transition(
        self, transaction_id: int, new_status: TransactionStatus
    ) -> Transaction:
        txn = self.get_transaction(transaction_id)
        if not txn.can_transition_to(new_status):
            raise InvalidStatusTransitionError(
                txn.id, txn.status.value, new_status.value
            )
        txn.status = new_status
        return txn

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Get a transaction with its entries and their accounts."""
        txn = self.db.execute(
            select(Transaction)
            .where(Transaction.id == transaction_id)
            .options(
                selectinload(Transaction.entries).selectinload(
                    JournalEntry.debit_account
                ),
                selectinload(Transaction.entries).selectinload(
                    JournalEntry.credit_account
                ),
            )
        ).scalar_one_or_none()
        if txn is None:
            raise NotFoundError(f"Transaction {transaction_id} not found")
        return txn

    def list_transactions(
        self, status: TransactionStatus | None = None
    ) -> list[Transaction]:
        """All transactions, newest date first."""
        query = (
            select(Transaction)
            .options(
                selectinload(Transaction.entries).selectinload(
                    JournalEntry.debit_account
                ),
                selectinload(Transaction.entries).selectinload(
                    JournalEntry.credit_account
                ),
            )
            .order_by(Transaction.date.desc(), Transaction.id.desc())
        )
        if status is not None:
            query = query.where(Transaction.status == status)
        return list(self.db.execute(query).scalars().all())
