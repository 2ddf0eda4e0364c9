"""Pytest configuration and shared fixtures for Finwise tests.

Provides an isolated SQLite database per test, repository wiring, row
factories and a Flask test client, so services and routes can be exercised
without touching the real application database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from finwise import create_app
from finwise.config import TestConfig
from finwise.extensions import build_repositories, get_repositories
from finwise.infra.database import create_session_factory
from finwise.models import Account, Bill, CreditCard, Installment, TimeEntry, Transaction

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with every table created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the repositories expect."""

    return create_session_factory(db_engine)


@pytest.fixture(scope="function")
def repositories(session_factory):
    return build_repositories(session_factory)


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Application wired to a private in-memory database and log directory."""

    monkeypatch.setenv("FINWISE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("FINWISE_TEST_DATABASE_URL", raising=False)
    app = create_app(config=TestConfig())
    app.config.update(TESTING=True)
    yield app
    app.extensions["finwise"]["engine"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def app_repositories(app):
    with app.app_context():
        yield get_repositories()


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def account_factory(repositories):
    """Factory for creating persisted accounts."""

    def _create_account(name: str = "Test Account", balance: float | None = 0.0) -> Account:
        return repositories.accounts.create(Account(name=name, balance=balance))

    return _create_account


@pytest.fixture
def transaction_factory(repositories):
    """Factory for creating persisted transactions.

    Amounts are non-negative; ``txn_type`` carries the direction.
    """

    def _create_transaction(
        amount: float,
        txn_type: str = "expense",
        on: date | None = None,
        account_id: int | None = None,
        status: str = "confirmed",
        description: str = "Test transaction",
    ) -> Transaction:
        return repositories.transactions.create(
            Transaction(
                type=txn_type,
                amount=amount,
                date=on or date(2026, 2, 10),
                account_id=account_id,
                status=status,
                description=description,
            )
        )

    return _create_transaction


@pytest.fixture
def card_factory(repositories):
    def _create_card(closing_day: int = 10, due_day: int = 17, name: str = "Card") -> CreditCard:
        return repositories.credit_cards.create(
            CreditCard(name=name, limit_amount=5000.0, closing_day=closing_day, due_day=due_day)
        )

    return _create_card


@pytest.fixture
def installment_factory(repositories, card_factory):
    def _create_installment(
        total_amount: float = 1000.0,
        total_installments: int = 3,
        installment_amount: float = 333.33,
        start_date: date = date(2026, 1, 5),
        confirmed_installments: int = 0,
        card: CreditCard | None = None,
    ) -> Installment:
        card = card or card_factory()
        return repositories.installments.create(
            Installment(
                description="Test purchase",
                credit_card_id=card.id,
                start_date=start_date,
                total_installments=total_installments,
                total_amount=total_amount,
                installment_amount=installment_amount,
                confirmed_installments=confirmed_installments,
            )
        )

    return _create_installment


@pytest.fixture
def bill_factory(repositories):
    def _create_bill(
        amount: float = 100.0,
        due_date: date = date(2026, 1, 31),
        is_recurring: bool = False,
        status: str = "pending",
    ) -> Bill:
        return repositories.bills.create(
            Bill(
                description="Test bill",
                amount=amount,
                due_date=due_date,
                is_recurring=is_recurring,
                status=status,
            )
        )

    return _create_bill


@pytest.fixture
def time_entry_factory(repositories):
    def _create_entry(
        on: date = date(2026, 2, 2),
        clock_in: str | None = "09:00",
        lunch_start: str | None = "12:00",
        lunch_end: str | None = "13:00",
        clock_out: str | None = "18:00",
        expected_hours: float = 8.0,
    ) -> TimeEntry:
        return repositories.time_entries.upsert(
            TimeEntry(
                date=on,
                clock_in=clock_in,
                lunch_start=lunch_start,
                lunch_end=lunch_end,
                clock_out=clock_out,
                expected_hours=expected_hours,
            )
        )

    return _create_entry


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance (default one cent)."""
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
