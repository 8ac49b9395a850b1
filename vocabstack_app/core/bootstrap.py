"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging
import os

from flask import Flask

from .extensions import csrf_protect, db, login_manager, migrate
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure package and Flask app logging from the config values."""

    setup_logging(
        app,
        log_level=app.config.get('LOG_LEVEL', 'INFO'),
        log_dir=app.config.get('LOG_DIR'),
        json_format=app.config.get('LOG_JSON', False),
    )

    if app.logger.handlers:
        return

    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    csrf_protect.init_app(app)
    migrate.init_app(app, db)

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..modules.learners.interface import get_learner

        try:
            return get_learner(int(user_id))
        except (TypeError, ValueError):
            return None


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create database tables and import the vocabulary seed if configured."""

    # Every model must be imported before create_all().
    from ..models import ReviewLog, ReviewState, User, Word, WordList, WordListEntry  # noqa: F401
    from ..modules.gamification.models import SessionCompletion, StudyStreak  # noqa: F401
    from ..modules.vocabulary.services.word_service import WordService

    db.create_all()

    seed_path = app.config.get('WORDS_SEED_PATH')
    if not seed_path:
        return
    if not os.path.exists(seed_path):
        app.logger.warning("Không tìm thấy file seed từ vựng: %s", seed_path)
        return

    inserted = WordService.seed_words_if_empty(WordService.load_seed_file(seed_path))
    if inserted:
        app.logger.info("Đã nạp %d từ vựng từ %s.", inserted, seed_path)
