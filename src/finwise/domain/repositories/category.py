"""Category repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.category import Category


class CategoryRepository(Protocol):
    """Storage for income/expense labels."""

    def get_by_id(self, category_id: int) -> Optional[Category]:
        ...

    def list_all(self) -> list[Category]:
        ...

    def list_by_type(self, category_type: str) -> list[Category]:
        """Categories of one type (income/expense), ordered by name."""
        ...

    def create(self, category: Category) -> Category:
        ...

    def delete(self, category_id: int) -> bool:
        """Remove a category; rows that used it become uncategorized."""
        ...
