"""Credit card billing-cycle parameters."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class CreditCard(SQLModel, table=True):
    """A card whose statement closes on ``closing_day`` and is due on ``due_day``."""

    __tablename__: ClassVar[str] = "credit_card"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=80, index=True)
    limit_amount: float = Field(default=0.0, nullable=False)
    closing_day: int = Field(nullable=False, ge=1, le=31)
    due_day: int = Field(nullable=False, ge=1, le=31)
    last_four_digits: Optional[str] = Field(default=None, max_length=4)
    color: Optional[str] = Field(default=None, max_length=16)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
