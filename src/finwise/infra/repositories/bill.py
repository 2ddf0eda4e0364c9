"""SQLModel implementation of Bill repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.bill import Bill


class SQLModelBillRepository:
    """SQLModel-based bill repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, bill_id: int) -> Optional[Bill]:
        """Retrieve a bill by ID."""
        with self.session_factory() as session:
            return session.get(Bill, bill_id)

    def list_all(self) -> list[Bill]:
        """List all bills by due date."""
        with self.session_factory() as session:
            statement = select(Bill).order_by(Bill.due_date)  # type: ignore
            return list(session.exec(statement).all())

    def list_pending(self) -> list[Bill]:
        """List bills that still need to be paid."""
        with self.session_factory() as session:
            statement = (
                select(Bill).where(Bill.status == "pending").order_by(Bill.due_date)  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, bill: Bill) -> Bill:
        """Create a new bill."""
        with self.session_factory() as session:
            session.add(bill)
            session.commit()
            session.refresh(bill)
            return bill

    def update(self, bill: Bill) -> Bill:
        """Persist changes to a bill."""
        with self.session_factory() as session:
            merged = session.merge(bill)
            session.commit()
            session.refresh(merged)
            return merged

    def delete(self, bill_id: int) -> bool:
        """Delete a bill; returns False when it did not exist."""
        with self.session_factory() as session:
            bill = session.get(Bill, bill_id)
            if bill is None:
                return False
            session.delete(bill)
            session.commit()
            return True
