"""Installment purchase rules.

Only the rule is stored; parcels are derived by
:func:`finwise.services.installments.compute_installment_schedule`.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Installment(SQLModel, table=True):
    __tablename__: ClassVar[str] = "installment"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(nullable=False, max_length=255)
    credit_card_id: int = Field(foreign_key="credit_card.id", nullable=False, index=True)
    category_id: Optional[int] = Field(default=None, foreign_key="category.id")
    start_date: date = Field(nullable=False, description="Purchase date")
    total_installments: int = Field(nullable=False, ge=1)
    total_amount: float = Field(nullable=False, gt=0)
    installment_amount: float = Field(nullable=False)
    confirmed_installments: int = Field(default=0, nullable=False, ge=0)
    status: str = Field(default="active", max_length=16, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
