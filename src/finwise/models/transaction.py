"""SQLModel definitions for ledger transactions."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Transaction(SQLModel, table=True):
    """A single income or expense entry.

    ``amount`` is always non-negative; direction comes from ``type``.
    Transactions without an account still count toward monthly totals.
    """

    __tablename__: ClassVar[str] = "transaction"

    id: Optional[int] = Field(default=None, primary_key=True)
    type: str = Field(nullable=False, max_length=16, index=True)
    amount: Optional[float] = Field(default=0.0, ge=0)
    date: dt.date = Field(nullable=False, index=True)
    description: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None)
    status: str = Field(default="confirmed", max_length=16, index=True)

    account_id: Optional[int] = Field(default=None, foreign_key="account.id", index=True)
    credit_card_id: Optional[int] = Field(default=None, foreign_key="credit_card.id")
    category_id: Optional[int] = Field(default=None, foreign_key="category.id")
    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
        nullable=False,
    )
