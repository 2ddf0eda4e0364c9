"""Flask CLI commands for Finwise."""

from __future__ import annotations

from datetime import date

import click

from .extensions import get_repositories
from .models import Account, Bill, Category, CreditCard, Installment, TimeEntry, Transaction
from .services.installments import format_billing_month, group_parcels_by_month, pending_parcels_for


def seed_demo_data(repositories) -> None:
    """Insert a small, coherent data set for trying the app out."""

    today = date.today()
    month_start = today.replace(day=1)

    checking = repositories.accounts.create(Account(name="Checking", type="checking", balance=1000.0))
    housing = repositories.categories.create(Category(name="Housing", type="expense"))
    repositories.transactions.create(
        Transaction(type="income", amount=5000.0, date=month_start, account_id=checking.id,
                    description="Salary")
    )
    repositories.transactions.create(
        Transaction(type="expense", amount=1200.0, date=month_start, account_id=checking.id,
                    category_id=housing.id, description="Rent")
    )
    repositories.transactions.create(
        Transaction(type="expense", amount=300.0, date=month_start, description="Groceries")
    )

    card = repositories.credit_cards.create(
        CreditCard(name="Main card", limit_amount=5000.0, closing_day=5, due_day=12)
    )
    repositories.installments.create(
        Installment(
            description="Laptop",
            credit_card_id=card.id,
            start_date=month_start,
            total_installments=3,
            total_amount=1000.0,
            installment_amount=333.33,
        )
    )
    repositories.bills.create(
        Bill(description="Electricity", amount=180.0, due_date=today, is_recurring=True)
    )
    repositories.time_entries.upsert(
        TimeEntry(date=today, clock_in="09:00", lunch_start="12:00", lunch_end="13:00",
                  clock_out="18:00", expected_hours=8.0)
    )


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("finwise-seed")
    def finwise_seed() -> None:
        """Seed a small demo data set."""

        seed_demo_data(get_repositories())
        click.echo("Demo data seeded.")

    @app.cli.command("finwise-forecast")
    def finwise_forecast() -> None:
        """Print pending installment totals per billing month."""

        repositories = get_repositories()
        cards = {card.id: card for card in repositories.credit_cards.list_all()}
        parcels = []
        for installment in repositories.installments.list_active():
            card = cards.get(installment.credit_card_id)
            if card is not None:
                parcels.extend(pending_parcels_for(installment, card))

        totals = group_parcels_by_month(parcels)
        if not totals:
            click.echo("No pending parcels.")
            return
        for month, total in totals.items():
            click.echo(f"{format_billing_month(month)}\t{total}")
