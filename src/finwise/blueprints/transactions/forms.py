"""Transaction form definitions and validation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping

from ...models.transaction import Transaction
from ..helpers import Errors, parse_date, parse_decimal, parse_int

TRANSACTION_TYPES = ("income", "expense")
TRANSACTION_STATUSES = ("confirmed", "pending")


@dataclass(slots=True)
class TransactionForm:
    """Represents transaction inputs and associated validation errors."""

    type: str = "expense"
    amount: Any = None
    date: Any = None
    description: str | None = None
    account_id: Any = None
    credit_card_id: Any = None
    category_id: Any = None
    status: str = "confirmed"
    errors: Errors = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TransactionForm":
        return cls(
            type=str(payload.get("type") or ""),
            amount=payload.get("amount"),
            date=payload.get("date"),
            description=payload.get("description") or None,
            account_id=payload.get("account_id"),
            credit_card_id=payload.get("credit_card_id"),
            category_id=payload.get("category_id"),
            status=str(payload.get("status") or "confirmed"),
        )

    def validate(self) -> bool:
        """Validate inputs returning True when all values are acceptable."""

        self.errors.clear()
        if self.type not in TRANSACTION_TYPES:
            self.errors.setdefault("type", []).append("Choose income or expense.")
        if self.status not in TRANSACTION_STATUSES:
            self.errors.setdefault("status", []).append("Choose confirmed or pending.")

        # Direction lives in ``type``; amounts are never negative.
        self.amount = parse_decimal(self.errors, "amount", self.amount, minimum=0)
        self.date = parse_date(self.errors, "date", self.date)
        self.account_id = parse_int(self.errors, "account_id", self.account_id, required=False)
        self.credit_card_id = parse_int(
            self.errors, "credit_card_id", self.credit_card_id, required=False
        )
        self.category_id = parse_int(self.errors, "category_id", self.category_id, required=False)
        return not self.errors

    def to_model(self) -> Transaction:
        if self.errors or not isinstance(self.date, date) or self.amount is None:
            raise ValueError("TransactionForm must validate before building a Transaction")
        return Transaction(
            type=self.type,
            amount=float(self.amount),
            date=self.date,
            description=self.description,
            account_id=self.account_id,
            credit_card_id=self.credit_card_id,
            category_id=self.category_id,
            status=self.status,
        )
