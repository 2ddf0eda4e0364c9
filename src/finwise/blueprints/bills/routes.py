"""Bill routes."""

from __future__ import annotations

from flask import jsonify
from werkzeug.exceptions import NotFound

from ...extensions import get_repositories
from ...services.balances import pending_bills_total
from ...services.bills import pay_bill
from ..helpers import check_reference, request_payload, to_json, validation_error
from . import bp
from .forms import BillForm


@bp.get("/")
def list_bills():
    bills = get_repositories().bills.list_all()
    return jsonify(
        {
            "bills": [to_json(bill) for bill in bills],
            "pending_total": pending_bills_total(bills),
        }
    )


@bp.post("/")
def create_bill():
    form = BillForm.from_payload(request_payload())
    if not form.validate():
        return validation_error(form.errors)

    repositories = get_repositories()
    errors: dict = {}
    check_reference(
        errors, "category_id", form.category_id, repositories.categories.get_by_id, "category"
    )
    if errors:
        return validation_error(errors)
    bill = repositories.bills.create(form.to_model())
    return jsonify(to_json(bill)), 201


@bp.post("/<int:bill_id>/pay")
def pay(bill_id: int):
    """Mark a bill paid; recurring bills get next month's occurrence created."""

    repositories = get_repositories()
    bill = repositories.bills.get_by_id(bill_id)
    if bill is None:
        raise NotFound(f"Bill {bill_id} not found")
    if bill.status == "paid":
        return jsonify({"errors": {"status": ["Bill is already paid."]}}), 409

    next_bill = pay_bill(bill)
    bill = repositories.bills.update(bill)
    if next_bill is not None:
        next_bill = repositories.bills.create(next_bill)

    return jsonify(
        {
            "bill": to_json(bill),
            "next_bill": to_json(next_bill) if next_bill is not None else None,
        }
    )


@bp.delete("/<int:bill_id>")
def delete_bill(bill_id: int):
    if not get_repositories().bills.delete(bill_id):
        raise NotFound(f"Bill {bill_id} not found")
    return "", 204
