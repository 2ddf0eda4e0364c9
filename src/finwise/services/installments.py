"""Credit-card installment schedules.

An installment purchase is stored as a single rule (total amount, number of
parcels, purchase date, card). Parcels are never persisted; they are derived
on demand from the rule and the card's closing/due days.
"""

from __future__ import annotations

import calendar
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from ..logging_config import get_logger

logger = get_logger(__name__)

_CENT = Decimal("0.01")

MONTH_ABBREVIATIONS = (
    "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
    "Jul", "Ago", "Set", "Out", "Nov", "Dez",
)


class InvalidInstallmentError(ValueError):
    """Raised when an installment rule cannot produce a schedule."""


class ParcelConfirmationError(ValueError):
    """Raised when a parcel cannot be confirmed for an installment."""


@dataclass(frozen=True, slots=True)
class Parcel:
    """One projected payment of an installment purchase."""

    parcel_number: int
    billing_month: date
    due_date: date
    amount: Decimal


def _round_cents(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value or 0))


def _to_date(value: date | str) -> date:
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


def _add_months(value: date, months: int) -> date:
    """Return the first day of the month ``months`` after ``value``."""

    index = value.month - 1 + months
    return date(value.year + index // 12, index % 12 + 1, 1)


def compute_first_billing_month(purchase_date: date, closing_day: int) -> date:
    """Return the statement month a purchase lands on.

    Purchases on or before the closing day are billed in the purchase month;
    later purchases roll over to the next statement.
    """

    purchase_date = _to_date(purchase_date)
    first_of_month = purchase_date.replace(day=1)
    if purchase_date.day <= closing_day:
        return first_of_month
    return _add_months(first_of_month, 1)


def _resolve_due_date(billing_month: date, due_day: int) -> date:
    last_day = calendar.monthrange(billing_month.year, billing_month.month)[1]
    return billing_month.replace(day=min(due_day, last_day))


def _validate(
    *, total_installments: int, total_amount: Decimal, closing_day: int, due_day: int,
    start_parcel: int,
) -> None:
    if total_installments < 1:
        raise InvalidInstallmentError("total_installments must be at least 1")
    if total_amount <= 0:
        raise InvalidInstallmentError("total_amount must be greater than zero")
    if not 1 <= closing_day <= 31:
        raise InvalidInstallmentError("closing_day must be between 1 and 31")
    if not 1 <= due_day <= 31:
        raise InvalidInstallmentError("due_day must be between 1 and 31")
    if not 1 <= start_parcel <= total_installments:
        raise InvalidInstallmentError(
            f"start_parcel must be between 1 and {total_installments}"
        )


def compute_installment_schedule(
    *,
    installment_amount: Decimal | float,
    total_installments: int,
    total_amount: Decimal | float,
    purchase_date: date | str,
    closing_day: int,
    due_day: int,
    start_parcel: int = 1,
) -> list[Parcel]:
    """Return the parcels of an installment purchase from ``start_parcel`` on.

    Every parcel is ``total_amount / total_installments`` rounded to cents,
    except the last one, which is ``installment_amount`` plus whatever cents
    the equal split left over. Each parcel's due date is the card's due day
    inside its billing month, clamped to the month's last day.

    Raises:
        InvalidInstallmentError: when the rule is out of range.
    """

    total = _to_decimal(total_amount)
    _validate(
        total_installments=total_installments,
        total_amount=total,
        closing_day=closing_day,
        due_day=due_day,
        start_parcel=start_parcel,
    )

    first_billing_month = compute_first_billing_month(_to_date(purchase_date), closing_day)
    base_amount = _round_cents(total / total_installments)
    rounding_diff = _round_cents(total - base_amount * total_installments)
    last_amount = _round_cents(_to_decimal(installment_amount) + rounding_diff)

    parcels: list[Parcel] = []
    for index in range(start_parcel - 1, total_installments):
        billing_month = _add_months(first_billing_month, index)
        is_last = index == total_installments - 1
        parcels.append(
            Parcel(
                parcel_number=index + 1,
                billing_month=billing_month,
                due_date=_resolve_due_date(billing_month, due_day),
                amount=last_amount if is_last else base_amount,
            )
        )
    return parcels


def get_pending_parcels(
    *,
    installment_amount: Decimal | float,
    total_installments: int,
    total_amount: Decimal | float,
    start_date: date | str,
    closing_day: int,
    due_day: int,
    confirmed_installments: int,
) -> list[Parcel]:
    """Return the parcels not yet confirmed (``parcel_number > confirmed``)."""

    confirmed = max(int(confirmed_installments or 0), 0)
    if confirmed >= total_installments:
        return []
    return compute_installment_schedule(
        installment_amount=installment_amount,
        total_installments=total_installments,
        total_amount=total_amount,
        purchase_date=start_date,
        closing_day=closing_day,
        due_day=due_day,
        start_parcel=confirmed + 1,
    )


def pending_parcels_for(installment: Any, card: Any) -> list[Parcel]:
    """Pending parcels for a stored installment rule and its credit card."""

    if installment.status != "active":
        return []
    return get_pending_parcels(
        installment_amount=installment.installment_amount,
        total_installments=installment.total_installments,
        total_amount=installment.total_amount,
        start_date=installment.start_date,
        closing_day=card.closing_day,
        due_day=card.due_day,
        confirmed_installments=installment.confirmed_installments,
    )


def group_parcels_by_month(parcels: Iterable[Parcel]) -> "OrderedDict[date, Decimal]":
    """Total parcel amounts per billing month, ordered chronologically."""

    totals: dict[date, Decimal] = {}
    for parcel in parcels:
        totals[parcel.billing_month] = totals.get(parcel.billing_month, Decimal("0")) + parcel.amount
    return OrderedDict(sorted(totals.items()))


def format_billing_month(billing_month: date | str) -> str:
    """Render a billing month as ``"Fev/2026"``."""

    value = _to_date(billing_month)
    return f"{MONTH_ABBREVIATIONS[value.month - 1]}/{value.year}"


def confirm_parcel(installment: Any, parcel_number: int) -> Any:
    """Mark ``parcel_number`` as confirmed on an installment rule.

    Parcels are confirmed in order; confirming the last one completes the
    installment.
    """

    if installment.status != "active":
        raise ParcelConfirmationError(f"Installment is {installment.status}")
    expected = int(installment.confirmed_installments or 0) + 1
    if parcel_number != expected:
        raise ParcelConfirmationError(
            f"Parcel {parcel_number} cannot be confirmed; next pending parcel is {expected}"
        )

    installment.confirmed_installments = expected
    if expected >= installment.total_installments:
        installment.status = "completed"
    logger.info(
        "Installment parcel confirmed",
        extra={"installment_id": installment.id, "parcel_number": parcel_number},
    )
    return installment


def cancel_installment(installment: Any) -> Any:
    """Stop projecting future parcels for an installment."""

    installment.status = "cancelled"
    logger.info("Installment cancelled", extra={"installment_id": installment.id})
    return installment


__all__ = [
    "InvalidInstallmentError",
    "Parcel",
    "ParcelConfirmationError",
    "cancel_installment",
    "compute_first_billing_month",
    "compute_installment_schedule",
    "confirm_parcel",
    "format_billing_month",
    "get_pending_parcels",
    "group_parcels_by_month",
    "pending_parcels_for",
]
