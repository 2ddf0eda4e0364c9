"""Account form definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from ...models.account import Account
from ..helpers import Errors, parse_decimal

ACCOUNT_TYPES = ("checking", "savings", "cash", "investment", "other")


@dataclass(slots=True)
class AccountForm:
    name: str = ""
    type: str = "checking"
    balance: Any = None
    color: str | None = None
    errors: Errors = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AccountForm":
        return cls(
            name=str(payload.get("name") or ""),
            type=str(payload.get("type") or "checking"),
            balance=payload.get("balance"),
            color=payload.get("color") or None,
        )

    def validate(self) -> bool:
        self.errors.clear()
        self.name = self.name.strip()
        if not self.name:
            self.errors.setdefault("name", []).append("Enter the account name.")
        if self.type not in ACCOUNT_TYPES:
            self.errors.setdefault("type", []).append("Choose a valid account type.")
        # Starting balance may be negative (overdrawn accounts) and defaults to zero.
        self.balance = parse_decimal(self.errors, "balance", self.balance, required=False)
        return not self.errors

    def to_model(self) -> Account:
        return Account(
            name=self.name,
            type=self.type,
            balance=float(self.balance or Decimal("0")),
            color=self.color,
        )
