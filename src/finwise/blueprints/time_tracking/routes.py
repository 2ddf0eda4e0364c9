"""Time-tracking routes: daily entries, monthly report and work schedule."""

from __future__ import annotations

from datetime import date

from flask import current_app, jsonify, request
from werkzeug.exceptions import NotFound

from ...extensions import get_repositories
from ...logging_config import get_logger
from ...models.time_entry import TimeEntry
from ...services.time_tracking import (
    calc_balance_minutes,
    calc_worked_minutes,
    format_balance,
    format_date,
    format_time,
    get_entry_status,
    minutes_to_string,
    resolve_expected_hours,
    summarize_month,
)
from ..helpers import month_bounds, request_payload, to_json, validation_error
from . import bp
from .forms import TimeEntryForm, WorkScheduleForm

logger = get_logger(__name__)


def _default_expected_hours() -> float:
    schedule = get_repositories().time_entries.get_schedule()
    if schedule is not None:
        return float(schedule.daily_hours)
    return float(current_app.config["FINWISE_CONFIG"].DEFAULT_EXPECTED_HOURS)


def _entry_json(entry: TimeEntry, default_expected_hours: float) -> dict:
    worked = calc_worked_minutes(entry)
    expected = resolve_expected_hours(entry.expected_hours, default_expected_hours)
    # Incomplete days have no balance yet.
    balance = calc_balance_minutes(worked, expected) if worked > 0 else None
    row = to_json(entry)
    row.update(
        {
            "date_label": format_date(entry.date),
            "clock_in_label": format_time(entry.clock_in),
            "clock_out_label": format_time(entry.clock_out),
            "status": get_entry_status(entry),
            "worked_minutes": worked,
            "worked_label": minutes_to_string(worked),
            "balance_minutes": balance,
            "balance_label": format_balance(balance) if balance is not None else None,
        }
    )
    return row


@bp.get("/entries")
def list_entries():
    start, end = month_bounds(request.args.get("month"), today=date.today())
    entries = get_repositories().time_entries.list_between(start, end)
    default_hours = _default_expected_hours()
    return jsonify(
        {
            "month": start.strftime("%Y-%m"),
            "entries": [_entry_json(entry, default_hours) for entry in entries],
        }
    )


@bp.put("/entries")
def upsert_entry():
    """Create or replace the entry for the submitted date."""

    form = TimeEntryForm.from_payload(request_payload())
    default_hours = _default_expected_hours()
    if not form.validate(default_expected_hours=default_hours):
        return validation_error(form.errors)

    entry = get_repositories().time_entries.upsert(form.to_model())
    logger.info("Time entry saved", extra={"entry_id": entry.id, "date": entry.date})
    return jsonify(_entry_json(entry, default_hours))


@bp.delete("/entries/<int:entry_id>")
def delete_entry(entry_id: int):
    if not get_repositories().time_entries.delete(entry_id):
        raise NotFound(f"Time entry {entry_id} not found")
    return "", 204


@bp.get("/report")
def monthly_report():
    """Worked/expected totals, overtime, shortfall and weekly balances for a month."""

    start, end = month_bounds(request.args.get("month"), today=date.today())
    summary = summarize_month(
        get_repositories().time_entries.list_between(start, end),
        default_expected_hours=_default_expected_hours(),
    )
    return jsonify(
        {
            "month": start.strftime("%Y-%m"),
            "total_worked": summary.total_worked,
            "total_worked_label": minutes_to_string(summary.total_worked),
            "total_expected": summary.total_expected,
            "total_balance": summary.total_balance,
            "total_balance_label": format_balance(summary.total_balance),
            "overtime_days": summary.overtime_days,
            "shortfall_days": summary.shortfall_days,
            "total_overtime": summary.total_overtime,
            "total_shortfall": summary.total_shortfall,
            "average_worked": summary.average_worked,
            "average_lunch": summary.average_lunch,
            "weeks": [
                {
                    "key": week.key,
                    "label": week.label,
                    "worked_minutes": week.worked_minutes,
                    "balance_minutes": week.balance_minutes,
                    "balance_label": format_balance(week.balance_minutes),
                }
                for week in summary.weeks
            ],
        }
    )


@bp.get("/schedule")
def get_schedule():
    schedule = get_repositories().time_entries.get_schedule()
    return jsonify(to_json(schedule) if schedule is not None else None)


@bp.put("/schedule")
def save_schedule():
    payload = request_payload()
    form = WorkScheduleForm(
        name=payload.get("name") or "",
        daily_hours=payload.get("daily_hours"),
        work_days=payload.get("work_days"),
    )
    if not form.validate():
        return validation_error(form.errors)
    schedule = get_repositories().time_entries.save_schedule(
        form.name, form.daily_hours, form.work_days
    )
    return jsonify(to_json(schedule))
