"""SQLModel implementation of Transaction repository."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.transaction import Transaction


class SQLModelTransactionRepository:
    """SQLModel-based transaction repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Retrieve a transaction by ID."""
        with self.session_factory() as session:
            return session.get(Transaction, transaction_id)

    def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Transaction]:
        """List transactions, newest first, with pagination."""
        with self.session_factory() as session:
            statement = (
                select(Transaction)
                .order_by(Transaction.date.desc(), Transaction.id.desc())  # type: ignore
                .offset(offset)
                .limit(limit)
            )
            return list(session.exec(statement).all())

    def filter_by_date_range(
        self, start_date: date, end_date: date, *, status: str | None = None
    ) -> list[Transaction]:
        """Get transactions with ``start_date <= date <= end_date``."""
        with self.session_factory() as session:
            statement = (
                select(Transaction)
                .where(Transaction.date >= start_date)
                .where(Transaction.date <= end_date)
            )
            if status is not None:
                statement = statement.where(Transaction.status == status)
            statement = statement.order_by(Transaction.date.desc())  # type: ignore
            return list(session.exec(statement).all())

    def list_account_linked(self, *, status: str | None = "confirmed") -> list[Transaction]:
        """All-time transactions that belong to an account."""
        with self.session_factory() as session:
            statement = select(Transaction).where(Transaction.account_id.is_not(None))  # type: ignore
            if status is not None:
                statement = statement.where(Transaction.status == status)
            return list(session.exec(statement).all())

    def create(self, transaction: Transaction) -> Transaction:
        """Create a new transaction."""
        with self.session_factory() as session:
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            return transaction

    def delete(self, transaction_id: int) -> bool:
        """Delete a transaction; returns False when it did not exist."""
        with self.session_factory() as session:
            transaction = session.get(Transaction, transaction_id)
            if transaction is None:
                return False
            session.delete(transaction)
            session.commit()
            return True
