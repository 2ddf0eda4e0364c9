"""Transaction routes."""

from __future__ import annotations

from datetime import date

from flask import jsonify, request
from werkzeug.exceptions import NotFound

from ...extensions import get_repositories
from ...logging_config import get_logger
from ...services.balances import compute_monthly_totals
from ..helpers import check_reference, month_bounds, request_payload, to_json, validation_error
from . import bp
from .forms import TransactionForm

logger = get_logger(__name__)


@bp.get("/")
def list_transactions():
    """Transactions for one month plus the month's income/expense rollup."""

    start, end = month_bounds(request.args.get("month"), today=date.today())
    status = request.args.get("status") or None
    rows = get_repositories().transactions.filter_by_date_range(start, end, status=status)
    totals = compute_monthly_totals(row for row in rows if row.status == "confirmed")
    return jsonify(
        {
            "month": start.strftime("%Y-%m"),
            "transactions": [to_json(row) for row in rows],
            "totals": {
                "income": totals.income,
                "expenses": totals.expenses,
                "savings": totals.savings,
                "savings_rate": totals.savings_rate,
            },
        }
    )


@bp.post("/")
def create_transaction():
    form = TransactionForm.from_payload(request_payload())
    if not form.validate():
        return validation_error(form.errors)

    repositories = get_repositories()
    errors: dict = {}
    check_reference(
        errors, "account_id", form.account_id, repositories.accounts.get_by_id, "account"
    )
    check_reference(
        errors, "credit_card_id", form.credit_card_id, repositories.credit_cards.get_by_id,
        "credit card",
    )
    check_reference(
        errors, "category_id", form.category_id, repositories.categories.get_by_id, "category"
    )
    if errors:
        return validation_error(errors)

    transaction = repositories.transactions.create(form.to_model())
    logger.info(
        "Transaction created",
        extra={"transaction_id": transaction.id, "type": transaction.type},
    )
    return jsonify(to_json(transaction)), 201


@bp.delete("/<int:transaction_id>")
def delete_transaction(transaction_id: int):
    if not get_repositories().transactions.delete(transaction_id):
        raise NotFound(f"Transaction {transaction_id} not found")
    return "", 204
