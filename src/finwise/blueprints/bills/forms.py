"""Bill form definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ...models.bill import Bill
from ..helpers import Errors, parse_bool, parse_date, parse_decimal, parse_int


@dataclass(slots=True)
class BillForm:
    description: str = ""
    amount: Any = None
    due_date: Any = None
    category_id: Any = None
    is_recurring: bool = False
    errors: Errors = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BillForm":
        return cls(
            description=str(payload.get("description") or payload.get("name") or ""),
            amount=payload.get("amount"),
            due_date=payload.get("due_date"),
            category_id=payload.get("category_id"),
            is_recurring=parse_bool(payload.get("is_recurring")),
        )

    def validate(self) -> bool:
        self.errors.clear()
        self.description = self.description.strip()
        if not self.description:
            self.errors.setdefault("description", []).append("Describe the bill.")
        self.amount = parse_decimal(self.errors, "amount", self.amount, minimum=0)
        self.due_date = parse_date(self.errors, "due_date", self.due_date)
        self.category_id = parse_int(self.errors, "category_id", self.category_id, required=False)
        return not self.errors

    def to_model(self) -> Bill:
        return Bill(
            description=self.description,
            amount=float(self.amount),
            due_date=self.due_date,
            category_id=self.category_id,
            is_recurring=self.is_recurring,
            status="pending",
        )
