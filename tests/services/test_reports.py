"""
Tests for the TrialBalanceReporter and GeneralLedgerQuery.
"""

import random
from datetime import datetime
from decimal import Decimal

import pytest

from vledger.exceptions import NotFoundError
from vledger.models.enums import AccountType, TransactionStatus
from vledger.schemas.account import AccountCreate, AccountUpdate
from vledger.schemas.transaction import TransactionCreate, TransactionEntryCreate
from vledger.services.account_registry import AccountRegistry
from vledger.services.reports import GeneralLedgerQuery, TrialBalanceReporter
from vledger.services.transaction_ledger import TransactionLedger


CHART = [
    ("1000", "Cash", AccountType.ASSET),
    ("1100", "Accounts Receivable", AccountType.ASSET),
    ("2000", "Accounts Payable", AccountType.LIABILITY),
    ("3000", "Owner's Equity", AccountType.EQUITY),
    ("4000", "Sales Revenue", AccountType.REVENUE),
    ("5200", "Rent Expense", AccountType.EXPENSE),
]


def setup_chart(db_session):
    registry = AccountRegistry(db_session)
    for code, name, account_type in CHART:
        registry.create_account(AccountCreate(
            code=code, name=name, account_type=account_type,
        ))
    db_session.commit()


def record(db_session, reference, debits, credits, post=True, description=None):
    """debits/credits are lists of (code, amount) pairs."""
    entries = [
        TransactionEntryCreate(debit_account_code=code, amount=Decimal(amount))
        for code, amount in debits
    ] + [
        TransactionEntryCreate(credit_account_code=code, amount=Decimal(amount))
        for code, amount in credits
    ]
    ledger = TransactionLedger(db_session)
    txn = ledger.create_transaction(TransactionCreate(
        reference=reference,
        description=description or reference,
        date=datetime(2026, 4, 1),
        entries=entries,
    ))
    db_session.commit()
    if post:
        ledger.post_transaction(txn.id)
        db_session.commit()
    return txn


def rows_by_code(rows):
    return {row.account.code: row for row in rows}


class TestTrialBalance:

    def test_scenario_cash_sale(self, db_session):
        setup_chart(db_session)
        record(db_session, "SALE-001", [("1000", "1000.00")], [("4000", "1000.00")])

        report = TrialBalanceReporter(db_session).get_trial_balance_report()
        rows = rows_by_code(report.rows)

        assert rows["1000"].debit == Decimal("1000.00")
        assert rows["1000"].credit == Decimal("0")
        assert rows["4000"].credit == Decimal("1000.00")
        assert rows["4000"].debit == Decimal("0")
        assert report.total_debit == report.total_credit == Decimal("1000.00")
        assert report.is_balanced

    def test_one_row_per_active_account_in_code_order(self, db_session):
        setup_chart(db_session)
        registry = AccountRegistry(db_session)
        registry.update_account(
            registry.get_by_code("1100").id, AccountUpdate(is_active=False)
        )
        db_session.commit()

        rows = TrialBalanceReporter(db_session).get_trial_balance()

        assert [r.account.code for r in rows] == ["1000", "2000", "3000", "4000", "5200"]
        assert all(r.debit == 0 and r.credit == 0 for r in rows)

    def test_row_carries_account_summary(self, db_session):
        setup_chart(db_session)
        row = TrialBalanceReporter(db_session).get_trial_balance()[0]

        assert row.account.code == "1000"
        assert row.account.name == "Cash"
        assert row.account.account_type == AccountType.ASSET

    def test_pending_transactions_not_reported(self, db_session):
        setup_chart(db_session)
        record(db_session, "T1", [("1000", "500")], [("4000", "500")])
        record(db_session, "T2", [("1000", "300")], [("4000", "300")], post=False)

        report = TrialBalanceReporter(db_session).get_trial_balance_report()
        assert rows_by_code(report.rows)["1000"].debit == Decimal("500")
        assert report.total_debit == Decimal("500")

    def test_abnormal_balance_goes_to_opposite_column(self, db_session):
        setup_chart(db_session)
        # Rent paid from a cash account that never received anything
        record(db_session, "RENT-001", [("5200", "300")], [("1000", "300")])

        report = TrialBalanceReporter(db_session).get_trial_balance_report()
        cash = rows_by_code(report.rows)["1000"]

        assert cash.balance == Decimal("-300")
        assert cash.debit == Decimal("0")
        assert cash.credit == Decimal("300")
        assert report.total_debit == report.total_credit == Decimal("300")

    def test_totals_equal_for_random_history(self, db_session):
        setup_chart(db_session)
        codes = [code for code, _, _ in CHART]
        rng = random.Random(20260417)

        for i in range(40):
            debit_codes = rng.sample(codes, rng.randint(1, 2))
            credit_codes = rng.sample(codes, rng.randint(1, 2))
            debits = [(c, Decimal(rng.randint(1, 100000)) / 100) for c in debit_codes]
            total = sum(amount for _, amount in debits)
            # Split the total over the credit lines
            if len(credit_codes) == 2 and total > Decimal("0.01"):
                first = (total / 3).quantize(Decimal("0.01"))
                credits = [(credit_codes[0], first), (credit_codes[1], total - first)]
            else:
                credits = [(credit_codes[0], total)]
            record(
                db_session, f"RND-{i:03d}",
                [(c, str(a)) for c, a in debits],
                [(c, str(a)) for c, a in credits],
                post=rng.random() < 0.8,
            )

        report = TrialBalanceReporter(db_session).get_trial_balance_report()
        assert report.total_debit == report.total_credit
        assert report.is_balanced


class TestGeneralLedger:

    def test_all_entries_in_write_order(self, db_session):
        setup_chart(db_session)
        record(db_session, "SALE-001", [("1000", "100")], [("4000", "100")])
        record(db_session, "RENT-001", [("5200", "40")], [("1000", "40")], post=False)

        lines = GeneralLedgerQuery(db_session).get_general_ledger()

        assert [line.reference for line in lines] == [
            "SALE-001", "SALE-001", "RENT-001", "RENT-001",
        ]
        assert [line.id for line in lines] == sorted(line.id for line in lines)
        assert lines[0].status == TransactionStatus.POSTED
        assert lines[2].status == TransactionStatus.PENDING

    def test_filter_by_account_either_side(self, db_session):
        setup_chart(db_session)
        record(db_session, "SALE-001", [("1000", "100")], [("4000", "100")])
        record(db_session, "RENT-001", [("5200", "40")], [("2000", "40")])
        record(db_session, "PAY-001", [("2000", "40")], [("1000", "40")])

        lines = GeneralLedgerQuery(db_session).get_general_ledger("1000")

        assert [line.reference for line in lines] == ["SALE-001", "PAY-001"]
        assert lines[0].debit_account.code == "1000"
        assert lines[0].credit_account is None
        assert lines[1].credit_account.code == "1000"
        assert lines[1].debit_account is None

    def test_line_carries_transaction_context(self, db_session):
        setup_chart(db_session)
        txn = record(
            db_session, "SALE-001", [("1000", "100")], [("4000", "100")],
            description="Counter sale",
        )

        line = GeneralLedgerQuery(db_session).get_general_ledger("4000")[0]

        assert line.transaction_id == txn.id
        assert line.reference == "SALE-001"
        assert line.date == datetime(2026, 4, 1)
        assert line.description == "Counter sale"
        assert line.credit_account.name == "Sales Revenue"
        assert line.amount == Decimal("100")

    def test_entry_description_preferred(self, db_session):
        setup_chart(db_session)
        ledger = TransactionLedger(db_session)
        ledger.create_transaction(TransactionCreate(
            reference="SALE-002",
            description="Counter sale",
            date=datetime(2026, 4, 2),
            entries=[
                TransactionEntryCreate(
                    debit_account_code="1000", amount=Decimal("5"), description="Till 1",
                ),
                TransactionEntryCreate(credit_account_code="4000", amount=Decimal("5")),
            ],
        ))
        db_session.commit()

        lines = GeneralLedgerQuery(db_session).get_general_ledger()
        assert [line.description for line in lines] == ["Till 1", "Counter sale"]

    def test_empty_ledger(self, db_session):
        assert GeneralLedgerQuery(db_session).get_general_ledger() == []

    def test_unknown_account_code(self, db_session):
        with pytest.raises(NotFoundError):
            GeneralLedgerQuery(db_session).get_general_ledger("9999")
