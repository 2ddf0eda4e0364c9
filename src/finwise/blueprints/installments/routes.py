"""Installment routes: rules, pending parcels and the monthly invoice forecast."""

from __future__ import annotations

from flask import jsonify
from werkzeug.exceptions import NotFound

from ...extensions import get_repositories
from ...logging_config import get_logger
from ...services.installments import (
    InvalidInstallmentError,
    Parcel,
    ParcelConfirmationError,
    cancel_installment,
    compute_installment_schedule,
    confirm_parcel,
    format_billing_month,
    group_parcels_by_month,
    pending_parcels_for,
)
from ..helpers import check_reference, parse_int, request_payload, to_json, validation_error
from . import bp
from .forms import CreditCardForm, InstallmentForm

logger = get_logger(__name__)


def _parcel_json(parcel: Parcel) -> dict:
    return {
        "parcel_number": parcel.parcel_number,
        "billing_month": parcel.billing_month.isoformat(),
        "billing_label": format_billing_month(parcel.billing_month),
        "due_date": parcel.due_date.isoformat(),
        "amount": str(parcel.amount),
    }


def _load_installment(installment_id: int):
    installment = get_repositories().installments.get_by_id(installment_id)
    if installment is None:
        raise NotFound(f"Installment {installment_id} not found")
    return installment


@bp.get("/")
def list_installments():
    """Installment rules with their pending parcels and the per-month forecast."""

    repositories = get_repositories()
    cards = {card.id: card for card in repositories.credit_cards.list_all()}

    items = []
    all_pending: list[Parcel] = []
    for installment in repositories.installments.list_all():
        card = cards.get(installment.credit_card_id)
        pending = pending_parcels_for(installment, card) if card is not None else []
        all_pending.extend(pending)
        row = to_json(installment)
        row["credit_card"] = card.name if card is not None else None
        row["pending_parcels"] = [_parcel_json(parcel) for parcel in pending]
        items.append(row)

    forecast = [
        {
            "billing_month": month.isoformat(),
            "label": format_billing_month(month),
            "total": str(total),
        }
        for month, total in group_parcels_by_month(all_pending).items()
    ]
    return jsonify({"installments": items, "forecast": forecast})


@bp.post("/")
def create_installment():
    form = InstallmentForm.from_payload(request_payload())
    if not form.validate():
        return validation_error(form.errors)

    repositories = get_repositories()
    card = repositories.credit_cards.get_by_id(form.credit_card_id)
    errors: dict = {}
    if card is None:
        errors["credit_card_id"] = ["Unknown credit card."]
    check_reference(
        errors, "category_id", form.category_id, repositories.categories.get_by_id, "category"
    )
    if errors:
        return validation_error(errors)

    try:
        schedule = compute_installment_schedule(
            installment_amount=form.installment_amount,
            total_installments=form.total_installments,
            total_amount=form.total_amount,
            purchase_date=form.purchase_date,
            closing_day=card.closing_day,
            due_day=card.due_day,
            start_parcel=form.start_installment,
        )
    except InvalidInstallmentError as exc:
        return validation_error({"__all__": [str(exc)]})

    installment = repositories.installments.create(form.to_model())
    logger.info(
        "Installment created",
        extra={"installment_id": installment.id, "parcels": installment.total_installments},
    )
    payload = to_json(installment)
    payload["pending_parcels"] = [_parcel_json(parcel) for parcel in schedule]
    return jsonify(payload), 201


@bp.post("/<int:installment_id>/confirm")
def confirm_installment_parcel(installment_id: int):
    """Confirm the next parcel (or the ``parcel_number`` given in the body)."""

    installment = _load_installment(installment_id)
    payload = request_payload()
    errors: dict = {}
    parcel_number = parse_int(
        errors, "parcel_number", payload.get("parcel_number"), required=False
    )
    if errors:
        return validation_error(errors)
    if parcel_number is None:
        parcel_number = installment.confirmed_installments + 1

    try:
        confirm_parcel(installment, parcel_number)
    except ParcelConfirmationError as exc:
        return jsonify({"errors": {"parcel_number": [str(exc)]}}), 409

    installment = get_repositories().installments.update(installment)
    return jsonify(to_json(installment))


@bp.post("/<int:installment_id>/cancel")
def cancel(installment_id: int):
    installment = cancel_installment(_load_installment(installment_id))
    installment = get_repositories().installments.update(installment)
    return jsonify(to_json(installment))


@bp.get("/cards")
def list_cards():
    cards = get_repositories().credit_cards.list_all()
    return jsonify({"cards": [to_json(card) for card in cards]})


@bp.post("/cards")
def create_card():
    form = CreditCardForm.from_payload(request_payload())
    if not form.validate():
        return validation_error(form.errors)
    card = get_repositories().credit_cards.create(form.to_model())
    logger.info("Credit card created", extra={"credit_card_id": card.id})
    return jsonify(to_json(card)), 201
