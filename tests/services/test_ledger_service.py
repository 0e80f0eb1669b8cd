"""
End-to-end scenarios through the LedgerService surface.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from vledger.exceptions import ValidationError
from vledger.models.enums import AccountType, TransactionStatus
from vledger.schemas.account import AccountCreate, AccountUpdate
from vledger.schemas.transaction import TransactionCreate, TransactionEntryCreate
from vledger.services.ledger_service import LedgerService


def two_line(reference, debit_code, credit_code, debit, credit=None):
    return TransactionCreate(
        reference=reference,
        description=reference,
        date=datetime(2026, 5, 1),
        entries=[
            TransactionEntryCreate(debit_account_code=debit_code, amount=Decimal(debit)),
            TransactionEntryCreate(
                credit_account_code=credit_code, amount=Decimal(credit or debit)
            ),
        ],
    )


@pytest.fixture
def ledger(db_session):
    service = LedgerService(db_session)
    service.create_account(AccountCreate(
        code="1000", name="Cash", account_type=AccountType.ASSET,
    ))
    service.create_account(AccountCreate(
        code="4000", name="Sales Revenue", account_type=AccountType.REVENUE,
    ))
    db_session.commit()
    return service


def test_account_round_trip(ledger):
    account = ledger.get_account_by_code("1000")
    assert (account.code, account.name, account.account_type) == (
        "1000", "Cash", AccountType.ASSET,
    )
    assert account.is_active is True
    assert ledger.get_account(account.id) is account


def test_scenario_a_posted_sale(ledger, db_session):
    txn = ledger.create_transaction(two_line("SALE-001", "1000", "4000", "1000.00"))
    db_session.commit()
    ledger.post_transaction(txn.id)
    db_session.commit()

    assert ledger.get_account_balance("1000") == Decimal("1000.00")
    assert ledger.get_account_balance("4000") == Decimal("1000.00")

    report = ledger.get_trial_balance()
    rows = {r.account.code: r for r in report.rows}
    assert rows["1000"].debit == Decimal("1000.00")
    assert rows["4000"].credit == Decimal("1000.00")
    assert report.total_debit == report.total_credit


def test_scenario_b_unbalanced_leaves_no_trace(ledger, db_session):
    before = len(ledger.get_all_transactions())

    with pytest.raises(ValidationError):
        ledger.create_transaction(two_line("SALE-002", "1000", "4000", "100.00", "200.00"))
    db_session.rollback()

    assert len(ledger.get_all_transactions()) == before
    assert ledger.get_general_ledger() == []


def test_scenario_c_pending_not_counted(ledger, db_session):
    t1 = ledger.create_transaction(two_line("T1", "1000", "4000", "500"))
    ledger.create_transaction(two_line("T2", "1000", "4000", "300"))
    db_session.commit()
    ledger.post_transaction(t1.id)
    db_session.commit()

    assert ledger.get_account_balance("1000") == Decimal("500.00")


def test_cancel_and_list(ledger, db_session):
    txn = ledger.create_transaction(two_line("T1", "1000", "4000", "50"))
    db_session.commit()
    ledger.cancel_transaction(txn.id)
    db_session.commit()

    assert ledger.get_transaction(txn.id).status == TransactionStatus.CANCELLED
    assert ledger.get_all_transactions(TransactionStatus.PENDING) == []


def test_update_and_list_accounts(ledger, db_session):
    cash = ledger.get_account_by_code("1000")
    ledger.update_account(cash.id, AccountUpdate(is_active=False))
    db_session.commit()

    assert [a.code for a in ledger.get_all_accounts()] == ["4000"]


def test_general_ledger_for_account(ledger, db_session):
    ledger.create_transaction(two_line("T1", "1000", "4000", "75"))
    db_session.commit()

    lines = ledger.get_general_ledger("1000")
    assert len(lines) == 1
    assert lines[0].debit_account.code == "1000"
