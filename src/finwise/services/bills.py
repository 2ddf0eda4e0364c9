"""Bill payment helpers."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Optional

from ..logging_config import get_logger
from ..models.bill import Bill

logger = get_logger(__name__)


def next_recurring_due_date(due_date: date) -> date:
    """Same day next month, clamped to the last day of that month."""

    month = due_date.month % 12 + 1
    year = due_date.year + (1 if due_date.month == 12 else 0)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(due_date.day, last_day))


def pay_bill(bill: Bill) -> Optional[Bill]:
    """Mark ``bill`` as paid and return the next occurrence for recurring bills."""

    bill.status = "paid"
    logger.info("Bill paid", extra={"bill_id": bill.id, "amount": bill.amount})
    if not bill.is_recurring or bill.due_date is None:
        return None

    return Bill(
        description=bill.description,
        amount=bill.amount,
        due_date=next_recurring_due_date(bill.due_date),
        category_id=bill.category_id,
        is_recurring=True,
        status="pending",
    )


__all__ = ["next_recurring_due_date", "pay_bill"]
