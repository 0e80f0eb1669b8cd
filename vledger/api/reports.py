"""
Reporting API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vledger.api.errors import http_error
from vledger.exceptions import LedgerError
from vledger.models.base import get_db
from vledger.schemas.report import GeneralLedgerLine, TrialBalanceReport
from vledger.services.ledger_service import LedgerService

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/trial-balance", response_model=TrialBalanceReport)
def get_trial_balance(db: Session = Depends(get_db)):
    """Every active account's balance in debit/credit columns, with totals."""
    return LedgerService(db).get_trial_balance()


@router.get("/general-ledger", response_model=list[GeneralLedgerLine])
def get_general_ledger(
    account_code: str | None = None,
    db: Session = Depends(get_db),
):
    """Journal entries in write order, optionally for one account."""
    try:
        return LedgerService(db).get_general_ledger(account_code)
    except LedgerError as e:
        raise http_error(e)
