"""Tests for credit-card installment schedules."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from finwise.services.installments import (
    InvalidInstallmentError,
    ParcelConfirmationError,
    cancel_installment,
    compute_first_billing_month,
    compute_installment_schedule,
    confirm_parcel,
    format_billing_month,
    get_pending_parcels,
    group_parcels_by_month,
    pending_parcels_for,
)


def _schedule(**overrides):
    params = dict(
        installment_amount=Decimal("333.33"),
        total_installments=3,
        total_amount=Decimal("1000.00"),
        purchase_date=date(2026, 1, 5),
        closing_day=10,
        due_day=17,
    )
    params.update(overrides)
    return compute_installment_schedule(**params)


class TestFirstBillingMonth:
    def test_purchase_on_closing_day_bills_same_month(self):
        assert compute_first_billing_month(date(2026, 3, 10), 10) == date(2026, 3, 1)

    def test_purchase_after_closing_day_rolls_over(self):
        assert compute_first_billing_month(date(2026, 3, 11), 10) == date(2026, 4, 1)

    def test_december_rolls_into_next_year(self):
        assert compute_first_billing_month(date(2025, 12, 28), 20) == date(2026, 1, 1)

    def test_accepts_iso_strings(self):
        assert compute_first_billing_month("2026-03-11", 10) == date(2026, 4, 1)


class TestSchedule:
    def test_remainder_goes_to_last_parcel(self):
        parcels = _schedule()

        assert [p.amount for p in parcels] == [
            Decimal("333.33"),
            Decimal("333.33"),
            Decimal("333.34"),
        ]
        assert sum(p.amount for p in parcels) == Decimal("1000.00")

    def test_billing_months_and_due_dates(self):
        parcels = _schedule()

        assert [p.parcel_number for p in parcels] == [1, 2, 3]
        assert [p.billing_month for p in parcels] == [
            date(2026, 1, 1),
            date(2026, 2, 1),
            date(2026, 3, 1),
        ]
        assert [p.due_date for p in parcels] == [
            date(2026, 1, 17),
            date(2026, 2, 17),
            date(2026, 3, 17),
        ]

    def test_due_day_clamps_to_short_months(self):
        parcels = _schedule(purchase_date=date(2026, 3, 1), due_day=31, total_installments=4,
                            total_amount=Decimal("400"), installment_amount=Decimal("100"))

        assert [p.due_date for p in parcels] == [
            date(2026, 3, 31),
            date(2026, 4, 30),
            date(2026, 5, 31),
            date(2026, 6, 30),
        ]

    def test_due_day_clamps_in_february(self):
        parcels = _schedule(purchase_date=date(2028, 2, 1), due_day=30, total_installments=1,
                            total_amount=Decimal("50"), installment_amount=Decimal("50"))
        assert parcels[0].due_date == date(2028, 2, 29)

    def test_single_installment_has_no_rounding(self):
        parcels = _schedule(total_installments=1, total_amount=Decimal("99.99"),
                            installment_amount=Decimal("99.99"))

        assert len(parcels) == 1
        assert parcels[0].amount == Decimal("99.99")
        assert parcels[0].parcel_number == 1

    def test_purchase_after_closing_starts_next_month(self):
        parcels = _schedule(purchase_date=date(2026, 1, 11))
        assert parcels[0].billing_month == date(2026, 2, 1)
        assert parcels[-1].billing_month == date(2026, 4, 1)

    @pytest.mark.parametrize(
        "total,count",
        [("1000.00", 3), ("100.00", 7), ("0.05", 3), ("1234.56", 12), ("10", 6)],
    )
    def test_full_schedule_sums_to_total(self, total, count):
        total = Decimal(total)
        base = (total / count).quantize(Decimal("0.01"))
        parcels = _schedule(total_amount=total, total_installments=count, installment_amount=base)
        assert sum(p.amount for p in parcels) == total

    def test_accepts_float_inputs(self):
        parcels = _schedule(total_amount=1000.0, installment_amount=333.33)
        assert parcels[-1].amount == Decimal("333.34")

    def test_schedule_crosses_year_boundary(self):
        parcels = _schedule(purchase_date=date(2026, 11, 2), total_installments=4,
                            total_amount=Decimal("400"), installment_amount=Decimal("100"))
        assert [p.billing_month for p in parcels] == [
            date(2026, 11, 1),
            date(2026, 12, 1),
            date(2027, 1, 1),
            date(2027, 2, 1),
        ]


class TestResumption:
    def test_start_parcel_returns_tail(self):
        full = _schedule(total_installments=10, total_amount=Decimal("1000"),
                         installment_amount=Decimal("100"))
        tail = _schedule(total_installments=10, total_amount=Decimal("1000"),
                         installment_amount=Decimal("100"), start_parcel=4)

        assert len(tail) == 10 - 4 + 1
        assert tail == full[3:]

    def test_start_at_last_parcel(self):
        parcels = _schedule(start_parcel=3)
        assert len(parcels) == 1
        assert parcels[0].parcel_number == 3
        assert parcels[0].amount == Decimal("333.34")

    def test_pending_parcels_skip_confirmed(self):
        pending = get_pending_parcels(
            installment_amount=Decimal("333.33"),
            total_installments=3,
            total_amount=Decimal("1000"),
            start_date="2026-01-05",
            closing_day=10,
            due_day=17,
            confirmed_installments=1,
        )
        assert [p.parcel_number for p in pending] == [2, 3]

    def test_pending_parcels_empty_when_all_confirmed(self):
        pending = get_pending_parcels(
            installment_amount=100,
            total_installments=2,
            total_amount=200,
            start_date=date(2026, 1, 5),
            closing_day=10,
            due_day=17,
            confirmed_installments=2,
        )
        assert pending == []


class TestValidation:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"total_installments": 0},
            {"total_amount": Decimal("0")},
            {"total_amount": Decimal("-10")},
            {"closing_day": 0},
            {"due_day": 32},
            {"start_parcel": 0},
            {"start_parcel": 4},
        ],
    )
    def test_invalid_rules_raise(self, overrides):
        with pytest.raises(InvalidInstallmentError):
            _schedule(**overrides)

    def test_invalid_installment_error_is_value_error(self):
        assert issubclass(InvalidInstallmentError, ValueError)


def test_format_billing_month():
    assert format_billing_month(date(2026, 2, 1)) == "Fev/2026"
    assert format_billing_month("2025-12-01") == "Dez/2025"
    assert format_billing_month(date(2026, 5, 1)) == "Mai/2026"


def test_group_parcels_by_month_sums_overlapping_purchases():
    first = _schedule()
    second = _schedule(purchase_date=date(2026, 1, 20), total_installments=2,
                       total_amount=Decimal("50"), installment_amount=Decimal("25"))

    totals = group_parcels_by_month(second + first)

    assert list(totals.keys()) == [date(2026, 1, 1), date(2026, 2, 1), date(2026, 3, 1)]
    assert totals[date(2026, 2, 1)] == Decimal("358.33")
    assert totals[date(2026, 3, 1)] == Decimal("358.34")


def _rule(**overrides):
    values = dict(
        id=1,
        status="active",
        confirmed_installments=0,
        total_installments=3,
        installment_amount=333.33,
        total_amount=1000.0,
        start_date=date(2026, 1, 5),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestConfirmation:
    def test_confirming_next_parcel_advances_counter(self):
        rule = confirm_parcel(_rule(), 1)
        assert rule.confirmed_installments == 1
        assert rule.status == "active"

    def test_confirming_last_parcel_completes(self):
        rule = confirm_parcel(_rule(confirmed_installments=2), 3)
        assert rule.confirmed_installments == 3
        assert rule.status == "completed"

    def test_out_of_order_confirmation_rejected(self):
        with pytest.raises(ParcelConfirmationError):
            confirm_parcel(_rule(), 2)

    def test_cancelled_installment_cannot_be_confirmed(self):
        with pytest.raises(ParcelConfirmationError):
            confirm_parcel(_rule(status="cancelled"), 1)

    def test_cancel_stops_projection(self):
        card = SimpleNamespace(closing_day=10, due_day=17)
        rule = cancel_installment(_rule())
        assert rule.status == "cancelled"
        assert pending_parcels_for(rule, card) == []

    def test_pending_parcels_for_active_rule(self):
        card = SimpleNamespace(closing_day=10, due_day=17)
        parcels = pending_parcels_for(_rule(confirmed_installments=1), card)
        assert [p.parcel_number for p in parcels] == [2, 3]
