"""Installment and credit card form definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

from ...models.credit_card import CreditCard
from ...models.installment import Installment
from ..helpers import Errors, parse_date, parse_decimal, parse_int


@dataclass(slots=True)
class InstallmentForm:
    """Inputs for a new installment purchase.

    ``start_installment`` is the parcel the purchase is currently on; every
    earlier parcel is recorded as already confirmed.
    """

    description: str = ""
    credit_card_id: Any = None
    purchase_date: Any = None
    total_installments: Any = None
    total_amount: Any = None
    installment_amount: Any = None
    category_id: Any = None
    start_installment: Any = 1
    errors: Errors = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "InstallmentForm":
        return cls(
            description=str(payload.get("description") or ""),
            credit_card_id=payload.get("credit_card_id"),
            purchase_date=payload.get("purchase_date"),
            total_installments=payload.get("total_installments"),
            total_amount=payload.get("total_amount"),
            installment_amount=payload.get("installment_amount"),
            category_id=payload.get("category_id"),
            start_installment=payload.get("start_installment") or 1,
        )

    def validate(self) -> bool:
        self.errors.clear()
        self.description = self.description.strip()
        if not self.description:
            self.errors.setdefault("description", []).append("Describe the purchase.")

        self.credit_card_id = parse_int(self.errors, "credit_card_id", self.credit_card_id)
        self.category_id = parse_int(self.errors, "category_id", self.category_id, required=False)
        self.purchase_date = parse_date(self.errors, "purchase_date", self.purchase_date)
        self.total_installments = parse_int(
            self.errors, "total_installments", self.total_installments, minimum=1, maximum=120
        )
        self.total_amount = parse_decimal(
            self.errors, "total_amount", self.total_amount, minimum=Decimal("0.01")
        )
        self.installment_amount = parse_decimal(
            self.errors, "installment_amount", self.installment_amount,
            minimum=Decimal("0.01"), required=False,
        )
        self.start_installment = parse_int(
            self.errors, "start_installment", self.start_installment,
            minimum=1, maximum=self.total_installments or 1,
        )

        if (
            self.installment_amount is None
            and isinstance(self.total_amount, Decimal)
            and isinstance(self.total_installments, int)
            and self.total_installments >= 1
        ):
            self.installment_amount = (self.total_amount / self.total_installments).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )
        return not self.errors

    def to_model(self) -> Installment:
        already_paid = max(0, int(self.start_installment) - 1)
        return Installment(
            description=self.description,
            credit_card_id=self.credit_card_id,
            category_id=self.category_id,
            start_date=self.purchase_date,
            total_installments=self.total_installments,
            total_amount=float(self.total_amount),
            installment_amount=float(self.installment_amount),
            confirmed_installments=already_paid,
            status="active",
        )


@dataclass(slots=True)
class CreditCardForm:
    name: str = ""
    limit_amount: Any = None
    closing_day: Any = None
    due_day: Any = None
    last_four_digits: str | None = None
    errors: Errors = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreditCardForm":
        return cls(
            name=str(payload.get("name") or ""),
            limit_amount=payload.get("limit_amount"),
            closing_day=payload.get("closing_day"),
            due_day=payload.get("due_day"),
            last_four_digits=payload.get("last_four_digits") or None,
        )

    def validate(self) -> bool:
        self.errors.clear()
        self.name = self.name.strip()
        if not self.name:
            self.errors.setdefault("name", []).append("Enter the card name.")
        self.limit_amount = parse_decimal(self.errors, "limit_amount", self.limit_amount, minimum=0)
        self.closing_day = parse_int(self.errors, "closing_day", self.closing_day, minimum=1, maximum=31)
        self.due_day = parse_int(self.errors, "due_day", self.due_day, minimum=1, maximum=31)
        if self.last_four_digits is not None:
            digits = str(self.last_four_digits).strip()
            if len(digits) != 4 or not digits.isdigit():
                self.errors.setdefault("last_four_digits", []).append("Enter exactly four digits.")
            self.last_four_digits = digits
        return not self.errors

    def to_model(self) -> CreditCard:
        return CreditCard(
            name=self.name,
            limit_amount=float(self.limit_amount),
            closing_day=self.closing_day,
            due_day=self.due_day,
            last_four_digits=self.last_four_digits,
        )
