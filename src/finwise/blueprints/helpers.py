"""Request parsing and validation helpers shared by the blueprints."""

from __future__ import annotations

import calendar
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping

from flask import jsonify, request
from werkzeug.exceptions import BadRequest

Errors = Dict[str, List[str]]

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")


def month_bounds(month_param: str | None, *, today: date) -> tuple[date, date]:
    """Return the first and last day of ``YYYY-MM`` (defaults to ``today``'s month)."""

    if not month_param:
        year, month = today.year, today.month
    else:
        match = _MONTH_RE.match(month_param.strip())
        if not match or not 1 <= int(match.group(2)) <= 12:
            raise BadRequest("month must look like YYYY-MM")
        year, month = int(match.group(1)), int(match.group(2))
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def request_payload() -> Mapping[str, Any]:
    """JSON body when present, otherwise submitted form fields."""

    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form


def validation_error(errors: Errors):
    return jsonify({"errors": errors}), 400


def to_json(row: Any) -> dict:
    return row.model_dump(mode="json")


def parse_decimal(
    errors: Errors, field: str, value: Any, *, minimum: Decimal | None = None,
    required: bool = True,
) -> Decimal | None:
    """Parse a money amount, recording an error message under ``field``."""

    if value is None or value == "":
        if required:
            errors.setdefault(field, []).append("This field is required.")
        return None
    try:
        parsed = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        errors.setdefault(field, []).append("Enter a valid number.")
        return None
    if not parsed.is_finite():
        errors.setdefault(field, []).append("Enter a valid number.")
        return None
    if minimum is not None and parsed < minimum:
        message = "Amount must be greater than zero." if minimum > 0 else "Amount must be at least zero."
        errors.setdefault(field, []).append(message)
    return parsed


def parse_int(
    errors: Errors, field: str, value: Any, *, minimum: int | None = None,
    maximum: int | None = None, required: bool = True,
) -> int | None:
    if value is None or value == "":
        if required:
            errors.setdefault(field, []).append("This field is required.")
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        errors.setdefault(field, []).append("Enter a whole number.")
        return None
    if (minimum is not None and parsed < minimum) or (maximum is not None and parsed > maximum):
        errors.setdefault(field, []).append(f"Must be between {minimum} and {maximum}.")
    return parsed


def parse_date(errors: Errors, field: str, value: Any, *, required: bool = True) -> date | None:
    if isinstance(value, date):
        return value
    if not value:
        if required:
            errors.setdefault(field, []).append("This field is required.")
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        errors.setdefault(field, []).append("Enter a date as YYYY-MM-DD.")
        return None


def parse_time(errors: Errors, field: str, value: Any, *, required: bool = False) -> str | None:
    """Validate a wall-clock ``HH:MM[:SS]`` string; blank means absent."""

    if value is None or str(value).strip() == "":
        if required:
            errors.setdefault(field, []).append("This field is required.")
        return None
    text = str(value).strip()
    if not _TIME_RE.match(text):
        errors.setdefault(field, []).append("Enter a time as HH:MM.")
        return None
    return text


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "yes", "on"}


def check_reference(
    errors: Errors, field: str, value: int | None, lookup: Callable[[int], Any], label: str,
) -> None:
    """Record an error when an optional foreign key points at no row."""

    if value is not None and lookup(value) is None:
        errors.setdefault(field, []).append(f"Unknown {label}.")
