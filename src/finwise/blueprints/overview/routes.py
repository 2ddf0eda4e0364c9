"""Overview dashboard routes."""

from __future__ import annotations

from datetime import date

from flask import jsonify, request

from ...extensions import get_repositories
from ..helpers import month_bounds
from . import bp
from .services import load_overview_summary


@bp.get("/")
def dashboard():
    """Return total balance, monthly savings and projected balance."""

    start, end = month_bounds(request.args.get("month"), today=date.today())
    return jsonify(load_overview_summary(get_repositories(), start=start, end=end))
