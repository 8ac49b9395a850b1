"""Gamification module: study streaks and session totals."""

from flask import Blueprint

gamification_bp = Blueprint('gamification', __name__)

from . import routes  # noqa: E402,F401
from . import events  # noqa: E402,F401
