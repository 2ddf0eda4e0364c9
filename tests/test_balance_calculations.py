"""Tests for total balance vs. monthly savings.

Total balance is all-time and only counts account-linked transactions on top
of each account's starting balance. Savings is single-month and counts every
transaction handed in, linked or not. These tests pin that asymmetry down.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest

from finwise.services.balances import (
    build_account_balance_map,
    build_dashboard_summary,
    compute_account_current_balance,
    compute_monthly_totals,
    compute_projected_balance,
    compute_total_balance,
    pending_bills_total,
)
from tests.conftest import assert_float_equal


@dataclass
class Acc:
    id: str
    name: str
    balance: Optional[float]


@dataclass
class Txn:
    type: str
    amount: Optional[float]
    account_id: Optional[str] = None
    date: str = "2026-02-10"


@dataclass
class PendingBill:
    amount: float
    status: Optional[str] = "pending"


class TestScenarioSingleAccount:
    """One account with a starting balance and a month of activity."""

    accounts = [Acc(id="acc-1", name="Nubank", balance=1000)]
    month = [
        Txn("income", 5000, "acc-1", "2026-02-05"),
        Txn("expense", 1200, "acc-1", "2026-02-10"),
        Txn("expense", 300, "acc-1", "2026-02-15"),
    ]

    def test_balance_map_holds_only_the_delta(self):
        assert build_account_balance_map(self.month) == {"acc-1": 3500}

    def test_total_balance_includes_starting_balance(self):
        balance_map = build_account_balance_map(self.month)
        assert compute_total_balance(self.accounts, balance_map) == 4500

    def test_monthly_totals(self):
        totals = compute_monthly_totals(self.month)
        assert totals.income == 5000
        assert totals.expenses == 1500
        assert totals.savings == 3500
        assert totals.savings_rate == 70

    def test_difference_is_the_starting_balance(self):
        balance_map = build_account_balance_map(self.month)
        total = compute_total_balance(self.accounts, balance_map)
        savings = compute_monthly_totals(self.month).savings
        assert total - savings == 1000


def test_single_linked_income_splits_into_balance_and_savings():
    account = Acc(id="a", name="Main", balance=250.0)
    txns = [Txn("income", 80.0, "a")]

    total = compute_total_balance([account], build_account_balance_map(txns))
    savings = compute_monthly_totals(txns).savings

    assert total == 330.0
    assert savings == 80.0
    assert total - savings == account.balance


class TestUnlinkedTransactions:
    def test_excluded_from_balance_map(self):
        txns = [Txn("income", 100, None), Txn("expense", 40, "")]
        assert build_account_balance_map(txns) == {}

    def test_do_not_change_total_balance(self):
        accounts = [Acc("a", "A", 500)]
        linked = [Txn("income", 100, "a")]
        with_unlinked = linked + [Txn("expense", 900, None), Txn("income", 50, None)]

        assert compute_total_balance(
            accounts, build_account_balance_map(linked)
        ) == compute_total_balance(accounts, build_account_balance_map(with_unlinked))

    def test_always_counted_in_monthly_totals(self):
        totals = compute_monthly_totals([Txn("income", 1000, "a"), Txn("expense", 400, None)])
        assert totals.expenses == 400
        assert totals.savings == 600


def test_missing_amounts_and_balances_count_as_zero():
    accounts = [Acc("a", "A", None)]
    txns = [Txn("income", None, "a"), Txn("expense", 20, "a")]
    balance_map = build_account_balance_map(txns)

    assert balance_map == {"a": -20}
    assert compute_account_current_balance(accounts[0], balance_map) == -20
    assert compute_monthly_totals(txns).income == 0


def test_account_without_transactions_keeps_starting_balance():
    assert compute_account_current_balance(Acc("z", "Z", 42.5), {}) == 42.5


def test_total_balance_across_multiple_accounts():
    accounts = [Acc("a", "A", 100), Acc("b", "B", 200), Acc("c", "C", None)]
    txns = [Txn("income", 50, "a"), Txn("expense", 75, "b"), Txn("income", 10, "c")]
    assert compute_total_balance(accounts, build_account_balance_map(txns)) == 285


def test_savings_rate_is_zero_without_income():
    totals = compute_monthly_totals([Txn("expense", 100)])
    assert totals.savings == -100
    assert totals.savings_rate == 0


def test_empty_period():
    totals = compute_monthly_totals([])
    assert (totals.income, totals.expenses, totals.savings, totals.savings_rate) == (0, 0, 0, 0)


@pytest.mark.parametrize(
    "income,expense,rate",
    [
        (200, 199, 1),  # 0.5% rounds away from zero
        (3, 2, 33),
        (3, 1, 67),
        (100, 150, -50),
    ],
)
def test_savings_rate_rounds_to_whole_percent(income, expense, rate):
    totals = compute_monthly_totals([Txn("income", income), Txn("expense", expense)])
    assert totals.savings_rate == rate


def test_unknown_types_are_ignored_in_monthly_totals():
    totals = compute_monthly_totals([Txn("transfer", 999), Txn("income", 10)])
    assert totals.income == 10
    assert totals.expenses == 0


def test_projected_balance_can_go_negative():
    assert compute_projected_balance(4500, 700) == 3800
    assert compute_projected_balance(100, 250) == -150


def test_pending_bills_total_skips_paid_bills():
    bills = [PendingBill(100.0), PendingBill(50.5), PendingBill(30.0, "paid"), PendingBill(9.5, None)]
    assert_float_equal(pending_bills_total(bills), 160.0)


def test_dashboard_summary_composes_every_metric():
    accounts = [Acc("acc-1", "Nubank", 1000)]
    all_time = [
        Txn("income", 2000, "acc-1", "2026-01-05"),
        Txn("income", 5000, "acc-1"),
        Txn("expense", 1500, "acc-1"),
    ]
    month = all_time[1:] + [Txn("expense", 100, None)]

    summary = build_dashboard_summary(
        accounts=accounts,
        all_transactions=all_time,
        month_transactions=month,
        bills=[PendingBill(400.0)],
    )

    assert summary["total_balance"] == 6500
    assert summary["pending_bills"] == 400
    assert summary["projected_balance"] == 6100
    assert summary["monthly"] == {
        "income": 5000,
        "expenses": 1600,
        "savings": 3400,
        "savings_rate": 68,
    }
    assert summary["accounts"] == [{"id": "acc-1", "name": "Nubank", "current_balance": 6500}]
