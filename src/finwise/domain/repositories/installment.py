"""Installment repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.installment import Installment


class InstallmentRepository(Protocol):
    """Repository for installment purchase rules."""

    def get_by_id(self, installment_id: int) -> Optional[Installment]:
        """Retrieve an installment rule by ID."""
        ...

    def list_all(self) -> list[Installment]:
        """List every installment rule."""
        ...

    def list_active(self) -> list[Installment]:
        """List rules with status ``active``."""
        ...

    def create(self, installment: Installment) -> Installment:
        ...

    def update(self, installment: Installment) -> Installment:
        ...
