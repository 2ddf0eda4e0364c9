"""SQLModel implementation of Category repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.bill import Bill
from ...models.category import Category
from ...models.installment import Installment
from ...models.transaction import Transaction

# Tables whose rows may reference a category.
_CATEGORIZED = (Transaction, Bill, Installment)


class SQLModelCategoryRepository:
    """SQLModel-based category repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, category_id: int) -> Optional[Category]:
        with self.session_factory() as session:
            return session.get(Category, category_id)

    def list_all(self) -> list[Category]:
        with self.session_factory() as session:
            statement = select(Category).order_by(Category.name)  # type: ignore
            return list(session.exec(statement).all())

    def list_by_type(self, category_type: str) -> list[Category]:
        with self.session_factory() as session:
            statement = (
                select(Category)
                .where(Category.type == category_type)
                .order_by(Category.name)  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, category: Category) -> Category:
        with self.session_factory() as session:
            session.add(category)
            session.commit()
            session.refresh(category)
            return category

    def delete(self, category_id: int) -> bool:
        with self.session_factory() as session:
            category = session.get(Category, category_id)
            if category is None:
                return False
            for model in _CATEGORIZED:
                rows = session.exec(select(model).where(model.category_id == category_id))
                for row in rows.all():
                    row.category_id = None
                    session.add(row)
            session.flush()
            session.delete(category)
            session.commit()
            return True
