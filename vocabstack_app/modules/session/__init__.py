"""Session module: walking a study session over the due cards."""

from flask import Blueprint

session_bp = Blueprint('session', __name__)

from . import routes  # noqa: E402,F401
