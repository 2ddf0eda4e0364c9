"""Time tracking blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("time_tracking", __name__, url_prefix="/time-tracking")

from . import routes  # noqa: E402,F401 - ensure routes register

__all__ = ["bp"]
