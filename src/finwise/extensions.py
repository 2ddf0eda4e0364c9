"""Database and repository wiring for the Flask application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from flask import Flask, current_app

from .config import BaseConfig
from .domain.repositories import (
    AccountRepository,
    BillRepository,
    CategoryRepository,
    CreditCardRepository,
    InstallmentRepository,
    TimeEntryRepository,
    TransactionRepository,
)
from .infra.database import create_db_engine, create_session_factory, init_database
from .infra.repositories import (
    SQLModelAccountRepository,
    SQLModelBillRepository,
    SQLModelCategoryRepository,
    SQLModelCreditCardRepository,
    SQLModelInstallmentRepository,
    SQLModelTimeEntryRepository,
    SQLModelTransactionRepository,
)


@dataclass
class Repositories:
    """Repositories shared by every blueprint of one application instance."""

    session_factory: Callable[[], Any]
    accounts: AccountRepository
    categories: CategoryRepository
    transactions: TransactionRepository
    credit_cards: CreditCardRepository
    installments: InstallmentRepository
    bills: BillRepository
    time_entries: TimeEntryRepository


def build_repositories(session_factory: Callable[[], Any]) -> Repositories:
    return Repositories(
        session_factory=session_factory,
        accounts=SQLModelAccountRepository(session_factory),
        categories=SQLModelCategoryRepository(session_factory),
        transactions=SQLModelTransactionRepository(session_factory),
        credit_cards=SQLModelCreditCardRepository(session_factory),
        installments=SQLModelInstallmentRepository(session_factory),
        bills=SQLModelBillRepository(session_factory),
        time_entries=SQLModelTimeEntryRepository(session_factory),
    )


def init_db(app: Flask) -> None:
    """Create the engine and schema, then attach repositories to the app."""

    config: BaseConfig = app.config["FINWISE_CONFIG"]
    engine = create_db_engine(config)
    init_database(engine)

    state = app.extensions.setdefault("finwise", {})
    state["engine"] = engine
    state["repositories"] = build_repositories(create_session_factory(engine))


def get_repositories() -> Repositories:
    """Return the repositories bound to the current application."""

    state = current_app.extensions.get("finwise", {})
    repositories = state.get("repositories")
    if repositories is None:  # pragma: no cover - misconfigured app
        raise RuntimeError("Database not initialized; call init_db(app) first")
    return repositories
