"""Repository protocol definitions for domain layer."""

from .account import AccountRepository
from .bill import BillRepository
from .category import CategoryRepository
from .credit_card import CreditCardRepository
from .installment import InstallmentRepository
from .time_entry import TimeEntryRepository
from .transaction import TransactionRepository

__all__ = [
    "AccountRepository",
    "BillRepository",
    "CategoryRepository",
    "CreditCardRepository",
    "InstallmentRepository",
    "TimeEntryRepository",
    "TransactionRepository",
]
