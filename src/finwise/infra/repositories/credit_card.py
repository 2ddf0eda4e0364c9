"""SQLModel implementation of CreditCard repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.credit_card import CreditCard


class SQLModelCreditCardRepository:
    """SQLModel-based credit card repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, card_id: int) -> Optional[CreditCard]:
        with self.session_factory() as session:
            return session.get(CreditCard, card_id)

    def list_all(self) -> list[CreditCard]:
        with self.session_factory() as session:
            statement = select(CreditCard).order_by(CreditCard.name)  # type: ignore
            return list(session.exec(statement).all())

    def create(self, card: CreditCard) -> CreditCard:
        with self.session_factory() as session:
            session.add(card)
            session.commit()
            session.refresh(card)
            return card
