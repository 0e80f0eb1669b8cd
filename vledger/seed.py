"""
Seed the database with a basic chart of accounts.

Run with ``python -m vledger.seed``. Codes that already exist
are left untouched, so running it twice is harmless.
"""

from sqlalchemy.orm import Session

from vledger.logging_config import configure_logging, get_logger
from vledger.models.account import Account
from vledger.models.base import SessionLocal
from vledger.models.enums import AccountType
from vledger.schemas.account import AccountCreate
from vledger.services.account_registry import AccountRegistry

logger = get_logger("seed")

DEFAULT_CHART_OF_ACCOUNTS: list[AccountCreate] = [
    # Assets
    AccountCreate(code="1000", name="Cash", account_type=AccountType.ASSET,
                  description="Cash and cash equivalents"),
    AccountCreate(code="1100", name="Accounts Receivable", account_type=AccountType.ASSET,
                  description="Money owed by customers"),
    AccountCreate(code="1200", name="Inventory", account_type=AccountType.ASSET,
                  description="Goods held for sale"),
    AccountCreate(code="1500", name="Equipment", account_type=AccountType.ASSET,
                  description="Office and business equipment"),
    # Liabilities
    AccountCreate(code="2000", name="Accounts Payable", account_type=AccountType.LIABILITY,
                  description="Money owed to suppliers"),
    AccountCreate(code="2100", name="Short-term Loans", account_type=AccountType.LIABILITY,
                  description="Loans payable within one year"),
    AccountCreate(code="2500", name="Long-term Debt", account_type=AccountType.LIABILITY,
                  description="Long-term loans and mortgages"),
    # Equity
    AccountCreate(code="3000", name="Owner's Equity", account_type=AccountType.EQUITY,
                  description="Owner's investment in the business"),
    AccountCreate(code="3100", name="Retained Earnings", account_type=AccountType.EQUITY,
                  description="Accumulated profits retained in business"),
    # Revenue
    AccountCreate(code="4000", name="Sales Revenue", account_type=AccountType.REVENUE,
                  description="Revenue from sales of goods/services"),
    AccountCreate(code="4100", name="Interest Income", account_type=AccountType.REVENUE,
                  description="Income from investments"),
    # Expenses
    AccountCreate(code="5000", name="Cost of Goods Sold", account_type=AccountType.EXPENSE,
                  description="Direct costs of producing goods sold"),
    AccountCreate(code="5100", name="Salaries Expense", account_type=AccountType.EXPENSE,
                  description="Employee salaries and wages"),
    AccountCreate(code="5200", name="Rent Expense", account_type=AccountType.EXPENSE,
                  description="Office and facility rent"),
    AccountCreate(code="5300", name="Utilities Expense", account_type=AccountType.EXPENSE,
                  description="Electricity, water, internet costs"),
    AccountCreate(code="5400", name="Marketing Expense", account_type=AccountType.EXPENSE,
                  description="Advertising and promotional costs"),
]


def seed_chart_of_accounts(db: Session) -> list[Account]:
    """Create the default accounts that don't exist yet. Returns the new ones."""
    registry = AccountRegistry(db)
    created = []
    for request in DEFAULT_CHART_OF_ACCOUNTS:
        if registry.get_by_code(request.code) is None:
            created.append(registry.create_account(request))
    return created


def main() -> None:
    configure_logging()
    db = SessionLocal()
    try:
        created = seed_chart_of_accounts(db)
        db.commit()
        logger.info("seed_completed", extra={"accounts_created": len(created)})
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
