"""
Chart-of-accounts API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response shapes, commit/rollback) and delegates everything else
to the LedgerService.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vledger.api.errors import http_error
from vledger.exceptions import LedgerError
from vledger.models.base import get_db
from vledger.schemas.account import (
    AccountBalanceResponse,
    AccountCreate,
    AccountResponse,
    AccountUpdate,
)
from vledger.services.ledger_service import LedgerService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """Create a new account in the chart of accounts."""
    service = LedgerService(db)
    try:
        account = service.create_account(request)
        db.commit()
        return account
    except LedgerError as e:
        db.rollback()
        raise http_error(e)


@router.get("", response_model=list[AccountResponse])
def get_all_accounts(db: Session = Depends(get_db)):
    """List active accounts, ordered by code."""
    return LedgerService(db).get_all_accounts()


@router.get("/code/{code}", response_model=AccountResponse)
def get_account_by_code(
    code: str,
    db: Session = Depends(get_db),
):
    try:
        return LedgerService(db).get_account_by_code(code)
    except LedgerError as e:
        raise http_error(e)


@router.get("/code/{code}/balance", response_model=AccountBalanceResponse)
def get_account_balance(
    code: str,
    db: Session = Depends(get_db),
):
    """
    Get the current balance of an account.

    Calculated from posted journal entries, never stored.
    """
    service = LedgerService(db)
    try:
        account = service.get_account_by_code(code)
        balance = service.get_account_balance(code)
    except LedgerError as e:
        raise http_error(e)

    return AccountBalanceResponse(
        account_code=account.code,
        account_name=account.name,
        account_type=account.account_type,
        balance=balance,
    )


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    db: Session = Depends(get_db),
):
    try:
        return LedgerService(db).get_account(account_id)
    except LedgerError as e:
        raise http_error(e)


@router.patch("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    request: AccountUpdate,
    db: Session = Depends(get_db),
):
    """
    Update name, description or active flag.

    Code and type cannot be changed; sending them is a 422.
    """
    service = LedgerService(db)
    try:
        account = service.update_account(account_id, request)
        db.commit()
        return account
    except LedgerError as e:
        db.rollback()
        raise http_error(e)
