"""Collections module: learner-owned named word lists."""

from flask import Blueprint

collections_bp = Blueprint('collections', __name__)

from . import routes  # noqa: E402,F401
