"""Account model: a place money lives, with a manually set starting balance."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Account(SQLModel, table=True):
    __tablename__: ClassVar[str] = "account"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=128, index=True)
    type: str = Field(default="checking", max_length=32)
    balance: Optional[float] = Field(
        default=0.0, description="Starting balance; transactions are applied on top"
    )
    color: Optional[str] = Field(default=None, max_length=16)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
