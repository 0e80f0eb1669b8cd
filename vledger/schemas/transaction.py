"""
Pydantic schemas for transaction operations.
"""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from vledger.models.enums import TransactionStatus
from vledger.money import MONEY_MAX_DIGITS, MONEY_PLACES, to_money
from vledger.schemas.account import AccountSummary


# --- Request Schemas ---

class TransactionEntryCreate(BaseModel):
    """
    One line of a new transaction.

    Exactly one of debit_account_code / credit_account_code
    must be given: a line is never both a debit and a credit.
    """
    debit_account_code: str | None = Field(default=None, min_length=1, max_length=20)
    credit_account_code: str | None = Field(default=None, min_length=1, max_length=20)
    amount: Decimal = Field(
        gt=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_PLACES
    )
    description: str | None = Field(default=None, max_length=255)

    @field_validator("amount")
    @classmethod
    def amount_must_be_money(cls, v: Decimal) -> Decimal:
        return to_money(v)

    @model_validator(mode="after")
    def exactly_one_side(self) -> "TransactionEntryCreate":
        if (self.debit_account_code is None) == (self.credit_account_code is None):
            raise ValueError(
                "entry must specify exactly one of "
                "debit_account_code or credit_account_code"
            )
        return self

    @property
    def account_code(self) -> str:
        return self.debit_account_code or self.credit_account_code

    @property
    def is_debit(self) -> bool:
        return self.debit_account_code is not None


class TransactionCreate(BaseModel):
    """A complete transaction: a group of entries that must balance."""
    reference: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=255)
    date: datetime
    entries: list[TransactionEntryCreate] = Field(min_length=2)

    @field_validator("date")
    @classmethod
    def date_as_naive_utc(cls, v: datetime) -> datetime:
        """Dates are stored naive in UTC; an offset is converted, not dropped."""
        if v.tzinfo is not None:
            return v.astimezone(UTC).replace(tzinfo=None)
        return v

    @field_validator("entries")
    @classmethod
    def must_have_debits_and_credits(cls, v: list) -> list:
        if not any(e.is_debit for e in v) or all(e.is_debit for e in v):
            raise ValueError(
                "transaction must contain at least one debit and one credit"
            )
        return v


# --- Response Schemas ---

class JournalEntryResponse(BaseModel):
    id: int
    debit_account: AccountSummary | None
    credit_account: AccountSummary | None
    amount: Decimal
    description: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class TransactionResponse(BaseModel):
    id: int
    reference: str
    description: str
    date: datetime
    amount: Decimal
    status: TransactionStatus
    created_at: datetime
    posted_at: datetime | None
    cancelled_at: datetime | None
    entries: list[JournalEntryResponse]

    model_config = {"from_attributes": True}
