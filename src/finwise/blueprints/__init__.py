"""Blueprint exports."""

from . import accounts, bills, categories, installments, overview, time_tracking, transactions

__all__ = [
    "accounts",
    "bills",
    "categories",
    "installments",
    "overview",
    "time_tracking",
    "transactions",
]
