"""
Pydantic schemas for chart-of-accounts operations.

These define the API contract. They are kept apart from the
database models because the API shape and the storage shape
are often different.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from vledger.models.enums import AccountType


# --- Request Schemas ---

class AccountCreate(BaseModel):
    """Request to create a new account."""
    code: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=100)
    account_type: AccountType
    description: str | None = None


class AccountUpdate(BaseModel):
    """
    Partial update of an account.

    Only these fields are mutable. code and account_type are
    fixed at creation, and extra="forbid" rejects any attempt
    to send them.
    """
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    is_active: bool | None = None

    model_config = {"extra": "forbid"}


# --- Response Schemas ---

class AccountSummary(BaseModel):
    """The parts of an account shown alongside entries and reports."""
    code: str
    name: str
    account_type: AccountType

    model_config = {"from_attributes": True}


class AccountResponse(BaseModel):
    id: int
    code: str
    name: str
    account_type: AccountType
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AccountBalanceResponse(BaseModel):
    """Response for an account balance query."""
    account_code: str
    account_name: str
    account_type: AccountType
    balance: Decimal
