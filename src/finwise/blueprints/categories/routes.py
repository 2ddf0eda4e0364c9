"""Category routes."""

from __future__ import annotations

from flask import jsonify, request
from werkzeug.exceptions import BadRequest, NotFound

from ...extensions import get_repositories
from ...logging_config import get_logger
from ..helpers import request_payload, to_json, validation_error
from . import bp
from .forms import CATEGORY_TYPES, CategoryForm

logger = get_logger(__name__)


@bp.get("/")
def list_categories():
    """List categories, optionally only those of ``?type=income|expense``."""

    repositories = get_repositories()
    category_type = request.args.get("type")
    if category_type:
        if category_type not in CATEGORY_TYPES:
            raise BadRequest("type must be income or expense")
        categories = repositories.categories.list_by_type(category_type)
    else:
        categories = repositories.categories.list_all()
    return jsonify({"categories": [to_json(category) for category in categories]})


@bp.post("/")
def create_category():
    form = CategoryForm.from_payload(request_payload())
    if not form.validate():
        return validation_error(form.errors)

    category = get_repositories().categories.create(form.to_model())
    logger.info("Category created", extra={"category_id": category.id})
    return jsonify(to_json(category)), 201


@bp.delete("/<int:category_id>")
def delete_category(category_id: int):
    if not get_repositories().categories.delete(category_id):
        raise NotFound(f"Category {category_id} not found")
    logger.info("Category deleted", extra={"category_id": category_id})
    return "", 204
