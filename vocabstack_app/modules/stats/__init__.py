"""Stats module: dashboard numbers aggregated from the other modules."""

from flask import Blueprint

stats_bp = Blueprint('stats', __name__)

from . import routes  # noqa: E402,F401
