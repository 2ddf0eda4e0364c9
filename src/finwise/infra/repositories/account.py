"""SQLModel implementation of Account repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.account import Account
from ...models.transaction import Transaction


class SQLModelAccountRepository:
    """SQLModel-based account repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, account_id: int) -> Optional[Account]:
        with self.session_factory() as session:
            return session.get(Account, account_id)

    def list_all(self) -> list[Account]:
        """List all accounts ordered by name."""
        with self.session_factory() as session:
            statement = select(Account).order_by(Account.name)  # type: ignore
            return list(session.exec(statement).all())

    def create(self, account: Account) -> Account:
        with self.session_factory() as session:
            session.add(account)
            session.commit()
            session.refresh(account)
            return account

    def update(self, account: Account) -> Account:
        with self.session_factory() as session:
            merged = session.merge(account)
            session.commit()
            session.refresh(merged)
            return merged

    def delete(self, account_id: int) -> bool:
        """Delete an account; its transactions stay but lose the link."""
        with self.session_factory() as session:
            account = session.get(Account, account_id)
            if account is None:
                return False
            linked = session.exec(select(Transaction).where(Transaction.account_id == account_id))
            for txn in linked.all():
                txn.account_id = None
                session.add(txn)
            session.flush()
            session.delete(account)
            session.commit()
            return True
