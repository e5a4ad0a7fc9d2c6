"""Transaction Schemas — whitelist for writes, projections for reads.

Invariants:
    - amount is an int in minor units on the wire (conversion is client-side)
    - payee non-empty after strip; notes optional and blank notes stored as None
    - account_id required, category_id optional; both must be owned (checked in services)

Design Decisions:
    - strict int for amount: a float on the wire is a client bug, not something to round
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class TransactionInput(BaseModel):
    """Create/update body for transactions."""
    model_config = ConfigDict(extra="ignore")

    amount: StrictInt
    payee: str = Field(min_length=1, max_length=255)
    notes: str | None = Field(None, max_length=2000)
    date: datetime.date
    account_id: str = Field(min_length=1)
    category_id: str | None = None

    @field_validator("payee")
    @classmethod
    def strip_payee(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("payee cannot be empty or whitespace")
        return v

    @field_validator("notes", "category_id")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


class TransactionRead(BaseModel):
    """Single-row projection (get, create, update)."""
    id: str
    amount: int
    payee: str
    notes: str | None
    date: datetime.date
    account_id: str
    category_id: str | None


class TransactionListItem(TransactionRead):
    """List projection — adds the joined account and category names."""
    account: str
    category: str | None
