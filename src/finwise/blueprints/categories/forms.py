"""Category form definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ...models.category import Category
from ..helpers import Errors

CATEGORY_TYPES = ("income", "expense")


@dataclass(slots=True)
class CategoryForm:
    name: str = ""
    type: str = "expense"
    color: str | None = None
    icon: str | None = None
    errors: Errors = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CategoryForm":
        return cls(
            name=str(payload.get("name") or ""),
            type=str(payload.get("type") or "expense"),
            color=payload.get("color") or None,
            icon=payload.get("icon") or None,
        )

    def validate(self) -> bool:
        self.errors.clear()
        self.name = self.name.strip()
        if not self.name:
            self.errors.setdefault("name", []).append("Enter the category name.")
        if self.type not in CATEGORY_TYPES:
            self.errors.setdefault("type", []).append("Choose income or expense.")
        return not self.errors

    def to_model(self) -> Category:
        return Category(name=self.name, type=self.type, color=self.color, icon=self.icon)
