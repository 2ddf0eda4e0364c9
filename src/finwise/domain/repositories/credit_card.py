"""Credit card repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.credit_card import CreditCard


class CreditCardRepository(Protocol):
    def get_by_id(self, card_id: int) -> Optional[CreditCard]:
        ...

    def list_all(self) -> list[CreditCard]:
        ...

    def create(self, card: CreditCard) -> CreditCard:
        ...
