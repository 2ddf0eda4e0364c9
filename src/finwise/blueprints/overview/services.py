"""Data loaders for the overview dashboard."""

from __future__ import annotations

from datetime import date

from ...extensions import Repositories
from ...services.balances import build_dashboard_summary


def load_overview_summary(repositories: Repositories, *, start: date, end: date) -> dict:
    """Gather the dashboard numbers for the month ``[start, end]``.

    Total balance uses every confirmed account-linked transaction ever
    recorded; the monthly block only sees confirmed transactions in range.
    """

    summary = build_dashboard_summary(
        accounts=repositories.accounts.list_all(),
        all_transactions=repositories.transactions.list_account_linked(status="confirmed"),
        month_transactions=repositories.transactions.filter_by_date_range(
            start, end, status="confirmed"
        ),
        bills=repositories.bills.list_pending(),
    )
    summary["month"] = start.strftime("%Y-%m")
    return summary
