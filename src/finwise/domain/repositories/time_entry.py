"""Time-tracking repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.time_entry import TimeEntry, WorkSchedule


class TimeEntryRepository(Protocol):
    """Repository for daily time entries and the work schedule."""

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        ...

    def get_by_date(self, day: date) -> Optional[TimeEntry]:
        ...

    def list_between(self, start_date: date, end_date: date) -> list[TimeEntry]:
        """Entries dated within the inclusive range."""
        ...

    def upsert(self, entry: TimeEntry) -> TimeEntry:
        """Insert or replace the entry for ``entry.date``."""
        ...

    def delete(self, entry_id: int) -> bool:
        ...

    def get_schedule(self) -> Optional[WorkSchedule]:
        ...

    def save_schedule(self, name: str, daily_hours: float, work_days: list[int]) -> WorkSchedule:
        ...
