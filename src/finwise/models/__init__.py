"""SQLModel table exports."""

from .account import Account
from .bill import Bill
from .category import Category
from .credit_card import CreditCard
from .installment import Installment
from .time_entry import TimeEntry, WorkSchedule
from .transaction import Transaction

__all__ = [
    "Account",
    "Bill",
    "Category",
    "CreditCard",
    "Installment",
    "TimeEntry",
    "Transaction",
    "WorkSchedule",
]
