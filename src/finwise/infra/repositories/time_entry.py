"""SQLModel implementation of the time-tracking repository."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.time_entry import TimeEntry, WorkSchedule

_EDITABLE_FIELDS = ("clock_in", "lunch_start", "lunch_end", "clock_out", "expected_hours", "notes")


class SQLModelTimeEntryRepository:
    """SQLModel-based repository for time entries and the work schedule."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        """Retrieve a time entry by ID."""
        with self.session_factory() as session:
            return session.get(TimeEntry, entry_id)

    def get_by_date(self, day: date) -> Optional[TimeEntry]:
        """Retrieve the entry recorded for ``day``."""
        with self.session_factory() as session:
            return session.exec(select(TimeEntry).where(TimeEntry.date == day)).first()

    def list_between(self, start_date: date, end_date: date) -> list[TimeEntry]:
        """Entries in ``[start_date, end_date]`` ordered by date."""
        with self.session_factory() as session:
            statement = (
                select(TimeEntry)
                .where(TimeEntry.date >= start_date)
                .where(TimeEntry.date <= end_date)
                .order_by(TimeEntry.date)  # type: ignore
            )
            return list(session.exec(statement).all())

    def upsert(self, entry: TimeEntry) -> TimeEntry:
        """Insert ``entry`` or overwrite the existing entry for the same date."""
        with self.session_factory() as session:
            existing = session.exec(select(TimeEntry).where(TimeEntry.date == entry.date)).first()
            if existing is None:
                target = entry
            else:
                target = existing
                for name in _EDITABLE_FIELDS:
                    setattr(target, name, getattr(entry, name))
                target.updated_at = datetime.now(timezone.utc)
            session.add(target)
            session.commit()
            session.refresh(target)
            return target

    def delete(self, entry_id: int) -> bool:
        """Delete a time entry; returns False when it did not exist."""
        with self.session_factory() as session:
            entry = session.get(TimeEntry, entry_id)
            if entry is None:
                return False
            session.delete(entry)
            session.commit()
            return True

    def get_schedule(self) -> Optional[WorkSchedule]:
        """Return the configured work schedule, if any."""
        with self.session_factory() as session:
            return session.exec(select(WorkSchedule)).first()

    def save_schedule(self, name: str, daily_hours: float, work_days: list[int]) -> WorkSchedule:
        """Create or replace the single work schedule."""
        with self.session_factory() as session:
            schedule = session.exec(select(WorkSchedule)).first() or WorkSchedule(name=name)
            schedule.name = name
            schedule.daily_hours = daily_hours
            schedule.work_days = list(work_days)
            session.add(schedule)
            session.commit()
            session.refresh(schedule)
            return schedule
