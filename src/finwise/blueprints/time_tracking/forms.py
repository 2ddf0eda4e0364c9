"""Time entry form definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ...models.time_entry import TimeEntry
from ...services.time_tracking import resolve_expected_hours
from ..helpers import Errors, parse_date, parse_decimal, parse_int, parse_time


@dataclass(slots=True)
class TimeEntryForm:
    """Inputs for one working day; blank times are stored as absent."""

    date: Any = None
    clock_in: Any = None
    lunch_start: Any = None
    lunch_end: Any = None
    clock_out: Any = None
    expected_hours: Any = None
    notes: str | None = None
    errors: Errors = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TimeEntryForm":
        return cls(
            date=payload.get("date"),
            clock_in=payload.get("clock_in"),
            lunch_start=payload.get("lunch_start"),
            lunch_end=payload.get("lunch_end"),
            clock_out=payload.get("clock_out"),
            expected_hours=payload.get("expected_hours"),
            notes=payload.get("notes") or None,
        )

    def validate(self, *, default_expected_hours: float) -> bool:
        self.errors.clear()
        self.date = parse_date(self.errors, "date", self.date)
        self.clock_in = parse_time(self.errors, "clock_in", self.clock_in, required=True)
        self.lunch_start = parse_time(self.errors, "lunch_start", self.lunch_start)
        self.lunch_end = parse_time(self.errors, "lunch_end", self.lunch_end)
        self.clock_out = parse_time(self.errors, "clock_out", self.clock_out)

        hours = parse_decimal(
            self.errors, "expected_hours", self.expected_hours, minimum=0, required=False
        )
        if hours is not None and hours > 24:
            self.errors.setdefault("expected_hours", []).append("Expected hours cannot exceed 24.")
        self.expected_hours = resolve_expected_hours(hours, default_expected_hours)
        return not self.errors

    def to_model(self) -> TimeEntry:
        return TimeEntry(
            date=self.date,
            clock_in=self.clock_in,
            lunch_start=self.lunch_start,
            lunch_end=self.lunch_end,
            clock_out=self.clock_out,
            expected_hours=self.expected_hours,
            notes=self.notes,
        )


@dataclass(slots=True)
class WorkScheduleForm:
    name: str = ""
    daily_hours: Any = None
    work_days: Any = None
    errors: Errors = field(default_factory=dict, init=False)

    def validate(self) -> bool:
        self.errors.clear()
        self.name = (self.name or "").strip() or "Default"
        hours = parse_decimal(self.errors, "daily_hours", self.daily_hours, minimum=0)
        self.daily_hours = float(hours) if hours is not None else None
        days = self.work_days if isinstance(self.work_days, list) else []
        parsed = [parse_int(self.errors, "work_days", day, minimum=0, maximum=6) for day in days]
        self.work_days = sorted({day for day in parsed if day is not None})
        if not self.work_days:
            self.errors.setdefault("work_days", []).append("Choose at least one working day.")
        return not self.errors
