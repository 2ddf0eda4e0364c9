"""Account routes."""

from __future__ import annotations

from flask import jsonify
from werkzeug.exceptions import NotFound

from ...extensions import get_repositories
from ...logging_config import get_logger
from ...services.balances import build_account_balance_map, compute_account_current_balance
from ..helpers import request_payload, to_json, validation_error
from . import bp
from .forms import AccountForm

logger = get_logger(__name__)


@bp.get("/")
def list_accounts():
    """List accounts with their current balances."""

    repositories = get_repositories()
    balance_map = build_account_balance_map(
        repositories.transactions.list_account_linked(status="confirmed")
    )
    accounts = []
    for account in repositories.accounts.list_all():
        row = to_json(account)
        row["current_balance"] = round(compute_account_current_balance(account, balance_map), 2)
        accounts.append(row)
    return jsonify({"accounts": accounts})


@bp.post("/")
def create_account():
    form = AccountForm.from_payload(request_payload())
    if not form.validate():
        return validation_error(form.errors)

    account = get_repositories().accounts.create(form.to_model())
    logger.info("Account created", extra={"account_id": account.id})
    return jsonify(to_json(account)), 201


@bp.put("/<int:account_id>")
def update_account(account_id: int):
    """Replace an account's name, type, starting balance and color."""

    repositories = get_repositories()
    account = repositories.accounts.get_by_id(account_id)
    if account is None:
        raise NotFound(f"Account {account_id} not found")

    form = AccountForm.from_payload(request_payload())
    if not form.validate():
        return validation_error(form.errors)

    edited = form.to_model()
    account.name = edited.name
    account.type = edited.type
    account.balance = edited.balance
    account.color = edited.color
    account = repositories.accounts.update(account)
    logger.info("Account updated", extra={"account_id": account.id})
    return jsonify(to_json(account))


@bp.delete("/<int:account_id>")
def delete_account(account_id: int):
    """Delete an account; its transactions are kept without an account."""

    if not get_repositories().accounts.delete(account_id):
        raise NotFound(f"Account {account_id} not found")
    logger.info("Account deleted", extra={"account_id": account_id})
    return "", 204
