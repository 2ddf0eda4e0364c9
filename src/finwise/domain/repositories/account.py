"""Account repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.account import Account


class AccountRepository(Protocol):
    """Storage for bank, cash and investment accounts."""

    def get_by_id(self, account_id: int) -> Optional[Account]:
        ...

    def list_all(self) -> list[Account]:
        """Accounts ordered by name."""
        ...

    def create(self, account: Account) -> Account:
        ...

    def update(self, account: Account) -> Account:
        """Persist edits to name, type, starting balance or color."""
        ...

    def delete(self, account_id: int) -> bool:
        """Remove an account, detaching its transactions.

        Returns False when no account has ``account_id``.
        """
        ...
