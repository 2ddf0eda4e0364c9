"""SQLModel implementation of Installment repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.installment import Installment


class SQLModelInstallmentRepository:
    """SQLModel-based installment repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, installment_id: int) -> Optional[Installment]:
        """Retrieve an installment rule by ID."""
        with self.session_factory() as session:
            return session.get(Installment, installment_id)

    def list_all(self) -> list[Installment]:
        """List every installment rule, oldest purchase first."""
        with self.session_factory() as session:
            statement = select(Installment).order_by(Installment.start_date)  # type: ignore
            return list(session.exec(statement).all())

    def list_active(self) -> list[Installment]:
        """List installments that still have parcels to project."""
        with self.session_factory() as session:
            statement = (
                select(Installment)
                .where(Installment.status == "active")
                .order_by(Installment.start_date)  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, installment: Installment) -> Installment:
        """Create a new installment rule."""
        with self.session_factory() as session:
            session.add(installment)
            session.commit()
            session.refresh(installment)
            return installment

    def update(self, installment: Installment) -> Installment:
        """Persist changes to an installment rule."""
        with self.session_factory() as session:
            merged = session.merge(installment)
            session.commit()
            session.refresh(merged)
            return merged
