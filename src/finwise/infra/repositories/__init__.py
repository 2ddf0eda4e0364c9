"""Concrete repository implementations using SQLModel."""

from .account import SQLModelAccountRepository
from .bill import SQLModelBillRepository
from .category import SQLModelCategoryRepository
from .credit_card import SQLModelCreditCardRepository
from .installment import SQLModelInstallmentRepository
from .time_entry import SQLModelTimeEntryRepository
from .transaction import SQLModelTransactionRepository

__all__ = [
    "SQLModelAccountRepository",
    "SQLModelBillRepository",
    "SQLModelCategoryRepository",
    "SQLModelCreditCardRepository",
    "SQLModelInstallmentRepository",
    "SQLModelTimeEntryRepository",
    "SQLModelTransactionRepository",
]
