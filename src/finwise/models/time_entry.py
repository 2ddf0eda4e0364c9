"""Work-hour tracking tables."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class TimeEntry(SQLModel, table=True):
    """One working day; times are wall-clock ``HH:MM`` strings."""

    __tablename__: ClassVar[str] = "time_entry"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: dt.date = Field(nullable=False, unique=True, index=True)
    clock_in: Optional[str] = Field(default=None, max_length=8)
    lunch_start: Optional[str] = Field(default=None, max_length=8)
    lunch_end: Optional[str] = Field(default=None, max_length=8)
    clock_out: Optional[str] = Field(default=None, max_length=8)
    expected_hours: Optional[float] = Field(default=8.0)
    notes: Optional[str] = Field(default=None)
    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
        nullable=False,
    )
    updated_at: Optional[dt.datetime] = Field(default=None)


class WorkSchedule(SQLModel, table=True):
    """Default daily target and working weekdays (0=Sunday .. 6=Saturday)."""

    __tablename__: ClassVar[str] = "work_schedule"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=64)
    daily_hours: float = Field(default=8.0, nullable=False)
    work_days: list[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5], sa_column=Column(JSON))
