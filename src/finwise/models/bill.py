"""Bills to pay."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Bill(SQLModel, table=True):
    """A payable with a due date; recurring bills spawn next month's copy when paid."""

    __tablename__: ClassVar[str] = "bill"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(nullable=False, max_length=255)
    amount: float = Field(nullable=False, ge=0)
    due_date: date = Field(nullable=False, index=True)
    category_id: Optional[int] = Field(default=None, foreign_key="category.id")
    is_recurring: bool = Field(default=False)
    status: str = Field(default="pending", max_length=16, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
