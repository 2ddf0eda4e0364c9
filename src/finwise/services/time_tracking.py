"""Work-hour arithmetic for clock-in/clock-out records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, Iterable, Optional, Union

DEFAULT_EXPECTED_HOURS = 8.0

TimeValue = Union[str, time, None]


def resolve_expected_hours(
    value: Optional[float], default: float = DEFAULT_EXPECTED_HOURS
) -> float:
    """Fall back to the configured daily target when an entry has none."""

    return default if value is None else float(value)


def time_to_minutes(value: TimeValue) -> int:
    """Parse ``"HH:MM"``/``"HH:MM:SS"`` into minutes after midnight (0 when absent)."""

    if not value:
        return 0
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    parts = value.split(":")
    return int(parts[0]) * 60 + int(parts[1])


def calc_worked_minutes(entry: Any) -> int:
    """Minutes between clock-in and clock-out, minus the lunch break.

    Incomplete days (missing clock-in or clock-out) count as zero. Spans that
    come out negative, e.g. a clock-out after midnight, are clamped to zero.
    """

    if not entry.clock_in or not entry.clock_out:
        return 0

    worked = time_to_minutes(entry.clock_out) - time_to_minutes(entry.clock_in)

    if entry.lunch_start and entry.lunch_end:
        lunch = time_to_minutes(entry.lunch_end) - time_to_minutes(entry.lunch_start)
        if lunch > 0:
            worked -= lunch

    return max(0, worked)


def calc_balance_minutes(worked_minutes: int, expected_hours: float) -> int:
    """Overtime (positive) or shortfall (negative) against the expected hours."""

    return worked_minutes - round(expected_hours * 60)


def minutes_to_string(minutes: int) -> str:
    """Render a duration magnitude as ``"1h 30min"``, ``"45min"`` or ``"2h"``."""

    hours, mins = divmod(abs(minutes), 60)
    if hours == 0:
        return f"{mins}min"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}min"


def format_balance(minutes: int) -> str:
    """Signed duration: ``"+1h 30min"``, ``"-45min"``; exactly zero is ``"0h"``."""

    if minutes == 0:
        return "0h"
    prefix = "+" if minutes > 0 else "-"
    return prefix + minutes_to_string(minutes)


def format_time(value: TimeValue) -> str:
    if not value:
        return "--:--"
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return value[:5]


def format_date(value: date | str) -> str:
    """``"2026-02-05"`` -> ``"05/02/2026"``."""

    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return value.strftime("%d/%m/%Y")


def get_entry_status(entry: Any) -> str:
    if not entry.clock_in:
        return "pending"
    if not entry.clock_out:
        return "in-progress"
    return "complete"


def get_week_number(value: date) -> int:
    """ISO-8601 week number."""

    return value.isocalendar()[1]


@dataclass(slots=True)
class WeekGroup:
    key: str
    label: str
    entries: list = field(default_factory=list)
    default_expected_hours: float = DEFAULT_EXPECTED_HOURS

    @property
    def worked_minutes(self) -> int:
        return sum(calc_worked_minutes(entry) for entry in self.entries)

    @property
    def expected_minutes(self) -> int:
        # Days without worked time do not count against the week.
        default = self.default_expected_hours
        return sum(
            round(resolve_expected_hours(entry.expected_hours, default) * 60)
            for entry in self.entries
            if calc_worked_minutes(entry) > 0
        )

    @property
    def balance_minutes(self) -> int:
        return self.worked_minutes - self.expected_minutes


def _entry_date(entry: Any) -> date:
    value = entry.date
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


def group_by_week(
    entries: Iterable[Any], default_expected_hours: float = DEFAULT_EXPECTED_HOURS
) -> list[WeekGroup]:
    """Bucket entries by ISO week, ordered by ``"YYYY-Www"`` key.

    Entries without ``expected_hours`` are measured against
    ``default_expected_hours``.
    """

    groups: dict[str, WeekGroup] = {}
    for entry in entries:
        iso_year, week, _ = _entry_date(entry).isocalendar()
        key = f"{iso_year}-W{week:02d}"
        group = groups.get(key)
        if group is None:
            group = groups[key] = WeekGroup(
                key=key, label=f"Sem. {week}", default_expected_hours=default_expected_hours
            )
        group.entries.append(entry)
    return [groups[key] for key in sorted(groups)]


@dataclass(slots=True)
class MonthSummary:
    """Aggregate metrics for a month of time entries."""

    total_worked: int
    total_expected: int
    total_balance: int
    overtime_days: int
    shortfall_days: int
    total_overtime: int
    total_shortfall: int
    average_worked: int
    average_lunch: int
    weeks: list[WeekGroup]


def summarize_month(
    entries: Iterable[Any], default_expected_hours: float = DEFAULT_EXPECTED_HOURS
) -> MonthSummary:
    """Roll up a month of time entries into report metrics."""

    entries = list(entries)

    def expected(entry: Any) -> float:
        return resolve_expected_hours(entry.expected_hours, default_expected_hours)

    completed = [entry for entry in entries if entry.clock_in and entry.clock_out]

    total_worked = 0
    total_expected = 0
    for entry in entries:
        worked = calc_worked_minutes(entry)
        total_worked += worked
        if worked > 0:
            total_expected += round(expected(entry) * 60)

    balances = [
        calc_balance_minutes(calc_worked_minutes(entry), expected(entry))
        for entry in completed
    ]
    overtime = [balance for balance in balances if balance > 0]
    shortfall = [balance for balance in balances if balance < 0]

    lunches = [
        time_to_minutes(entry.lunch_end) - time_to_minutes(entry.lunch_start)
        for entry in entries
        if entry.lunch_start and entry.lunch_end
    ]

    return MonthSummary(
        total_worked=total_worked,
        total_expected=total_expected,
        total_balance=total_worked - total_expected,
        overtime_days=len(overtime),
        shortfall_days=len(shortfall),
        total_overtime=sum(overtime),
        total_shortfall=sum(shortfall),
        average_worked=round(total_worked / len(completed)) if completed else 0,
        average_lunch=round(sum(lunches) / len(lunches)) if lunches else 0,
        weeks=group_by_week(entries, default_expected_hours),
    )

