"""Bill repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.bill import Bill


class BillRepository(Protocol):
    """Repository for bills to pay."""

    def get_by_id(self, bill_id: int) -> Optional[Bill]:
        ...

    def list_all(self) -> list[Bill]:
        ...

    def list_pending(self) -> list[Bill]:
        """Bills whose status is still ``pending``."""
        ...

    def create(self, bill: Bill) -> Bill:
        ...

    def update(self, bill: Bill) -> Bill:
        ...

    def delete(self, bill_id: int) -> bool:
        ...
