"""Transaction ORM — a dated money movement against one account.

Invariants:
    - amount is an Integer in minor units (never float/decimal in storage)
    - account_id is required; deleting the account deletes its transactions
    - category_id is optional; deleting the category nulls the reference
    - user_id duplicates the owner so every query scopes on this table alone

Design Decisions:
    - Denormalized user_id: the owner filter never needs a JOIN to accounts
    - BigInteger amount: minor units of large balances overflow int32
"""

import datetime

from sqlalchemy import BigInteger, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from finboard.db.base import Base


class Transaction(Base):
    """Transaction entity — owner-scoped, references Account and Category."""
    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    payee: Mapped[str] = mapped_column(Text, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    account_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )
    category_id: Mapped[str | None] = mapped_column(
        String(64),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    )
