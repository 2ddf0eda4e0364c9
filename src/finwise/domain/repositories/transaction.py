"""Transaction repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.transaction import Transaction


class TransactionRepository(Protocol):
    """Repository for managing ledger transactions."""

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        ...

    def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Transaction]:
        ...

    def filter_by_date_range(
        self, start_date: date, end_date: date, *, status: str | None = None
    ) -> list[Transaction]:
        """Transactions dated within the inclusive range."""
        ...

    def list_account_linked(self, *, status: str | None = "confirmed") -> list[Transaction]:
        """All-time transactions with an ``account_id``."""
        ...

    def create(self, transaction: Transaction) -> Transaction:
        ...

    def delete(self, transaction_id: int) -> bool:
        ...
