"""Service module exports."""

from . import balances, bills, installments, time_tracking

__all__ = [
    "balances",
    "bills",
    "installments",
    "time_tracking",
]
