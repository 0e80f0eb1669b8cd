"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vledger.api.errors import http_error
from vledger.exceptions import LedgerError
from vledger.models.base import get_db
from vledger.models.enums import TransactionStatus
from vledger.schemas.transaction import TransactionCreate, TransactionResponse
from vledger.services.ledger_service import LedgerService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request: TransactionCreate,
    db: Session = Depends(get_db),
):
    """
    Record a balanced transaction in PENDING status.

    The transaction and all of its entries are committed
    together. Any failure rolls the whole request back.
    """
    service = LedgerService(db)
    try:
        txn = service.create_transaction(request)
        db.commit()
        return txn
    except LedgerError as e:
        db.rollback()
        raise http_error(e)


@router.get("", response_model=list[TransactionResponse])
def get_all_transactions(
    status: TransactionStatus | None = None,
    db: Session = Depends(get_db),
):
    """List transactions, newest first, optionally by status."""
    return LedgerService(db).get_all_transactions(status)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
):
    """Get a transaction with its journal entries."""
    try:
        return LedgerService(db).get_transaction(transaction_id)
    except LedgerError as e:
        raise http_error(e)


@router.post("/{transaction_id}/post", response_model=TransactionResponse)
def post_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
):
    """Post a PENDING transaction so it counts towards balances."""
    service = LedgerService(db)
    try:
        txn = service.post_transaction(transaction_id)
        db.commit()
        return txn
    except LedgerError as e:
        db.rollback()
        raise http_error(e)


@router.post("/{transaction_id}/cancel", response_model=TransactionResponse)
def cancel_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
):
    """Cancel a PENDING transaction."""
    service = LedgerService(db)
    try:
        txn = service.cancel_transaction(transaction_id)
        db.commit()
        return txn
    except LedgerError as e:
        db.rollback()
        raise http_error(e)
