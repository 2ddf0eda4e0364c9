"""Account balance and monthly savings calculators.

"Total balance" and "savings" are two different metrics computed from two
different slices of the same transaction stream:

* total balance is all-time: every account's starting balance plus every
  transaction linked to an account, whatever its date. Transactions without
  an ``account_id`` never touch it.
* savings is single-period: income minus expenses of the transactions the
  caller hands in, whether or not they are linked to an account.

They only coincide for an account opened this month with no starting balance.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping, Optional, Protocol

from ..logging_config import get_logger

logger = get_logger(__name__)

INCOME = "income"
EXPENSE = "expense"


class TransactionLike(Protocol):
    type: str
    amount: Optional[float]
    account_id: Optional[Any]


class AccountLike(Protocol):
    id: Any
    balance: Optional[float]


@dataclass(slots=True)
class MonthlyTotals:
    """Income/expense rollup for a single period."""

    income: float
    expenses: float
    savings: float
    savings_rate: int


def _amount(value: Optional[float]) -> float:
    return float(value or 0.0)


def build_account_balance_map(transactions: Iterable[TransactionLike]) -> dict[Any, float]:
    """Return the signed transaction delta per account id.

    The delta excludes each account's starting balance; transactions with no
    ``account_id`` are skipped.
    """

    deltas: dict[Any, float] = {}
    for txn in transactions:
        if txn.account_id is None or txn.account_id == "":
            continue
        amount = _amount(txn.amount)
        signed = amount if txn.type == INCOME else -amount
        deltas[txn.account_id] = deltas.get(txn.account_id, 0.0) + signed
    return deltas


def compute_account_current_balance(
    account: AccountLike, balance_map: Mapping[Any, float]
) -> float:
    """Starting balance plus the account's transaction delta."""

    return _amount(account.balance) + balance_map.get(account.id, 0.0)


def compute_total_balance(
    accounts: Iterable[AccountLike], balance_map: Mapping[Any, float]
) -> float:
    """Sum of current balances across every account."""

    return sum(
        (compute_account_current_balance(account, balance_map) for account in accounts), 0.0
    )


def _savings_rate(savings: float, income: float) -> int:
    if income <= 0:
        return 0
    ratio = Decimal(str(savings)) / Decimal(str(income)) * 100
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_monthly_totals(period_transactions: Iterable[TransactionLike]) -> MonthlyTotals:
    """Aggregate income, expenses and savings for an already-filtered period.

    Callers are responsible for restricting ``period_transactions`` to the
    month and status they care about; no date filtering happens here.
    """

    income = 0.0
    expenses = 0.0
    for txn in period_transactions:
        if txn.type == INCOME:
            income += _amount(txn.amount)
        elif txn.type == EXPENSE:
            expenses += _amount(txn.amount)

    savings = income - expenses
    return MonthlyTotals(
        income=round(income, 2),
        expenses=round(expenses, 2),
        savings=round(savings, 2),
        savings_rate=_savings_rate(savings, income),
    )


def compute_projected_balance(total_balance: float, pending_bills_total: float) -> float:
    """Total balance minus pending bills. May go negative."""

    return total_balance - pending_bills_total


def pending_bills_total(bills: Iterable[Any]) -> float:
    """Sum the amounts of bills still marked as pending."""

    return round(
        sum(_amount(bill.amount) for bill in bills if (bill.status or "pending") == "pending"),
        2,
    )


def build_dashboard_summary(
    *,
    accounts: Iterable[AccountLike],
    all_transactions: Iterable[TransactionLike],
    month_transactions: Iterable[TransactionLike],
    bills: Iterable[Any],
) -> dict:
    """Compose the numbers rendered on the overview dashboard."""

    accounts = list(accounts)
    balance_map = build_account_balance_map(all_transactions)
    total_balance = compute_total_balance(accounts, balance_map)
    monthly = compute_monthly_totals(month_transactions)
    pending = pending_bills_total(bills)
    projected = compute_projected_balance(total_balance, pending)

    logger.debug(
        "Dashboard summary computed",
        extra={"accounts": len(accounts), "total_balance": total_balance},
    )

    return {
        "total_balance": round(total_balance, 2),
        "projected_balance": round(projected, 2),
        "pending_bills": pending,
        "monthly": {
            "income": monthly.income,
            "expenses": monthly.expenses,
            "savings": monthly.savings,
            "savings_rate": monthly.savings_rate,
        },
        "accounts": [
            {
                "id": account.id,
                "name": getattr(account, "name", ""),
                "current_balance": round(
                    compute_account_current_balance(account, balance_map), 2
                ),
            }
            for account in accounts
        ],
    }


__all__ = [
    "MonthlyTotals",
    "build_account_balance_map",
    "build_dashboard_summary",
    "compute_account_current_balance",
    "compute_monthly_totals",
    "compute_projected_balance",
    "compute_total_balance",
    "pending_bills_total",
]
