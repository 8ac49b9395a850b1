# File: vocabstack_app/config.py
# Application configuration loaded from the environment.

import os

from dotenv import load_dotenv

load_dotenv()

# vocabstack_app/config.py lives one level below the project root.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "vocabstack.db")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Cấu hình ứng dụng VocabStack."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON', False)

    # Calendar day boundaries for scheduling
    SYSTEM_TIMEZONE = os.environ.get('SYSTEM_TIMEZONE', 'UTC')

    # Study sessions
    STUDY_SESSION_LIMIT = int(os.environ.get('STUDY_SESSION_LIMIT', 20))
    # A finalized session with zero answered cards still counts as a study day.
    STREAK_COUNTS_EMPTY_SESSIONS = _env_flag('STREAK_COUNTS_EMPTY_SESSIONS', True)

    # Collections
    COLLECTION_NAME_MAX_LENGTH = 64

    # JSON file with the vocabulary seed (list of word entries), imported into an empty table
    WORDS_SEED_PATH = os.environ.get('WORDS_SEED_PATH') or os.path.join(BASE_DIR, 'data', 'words.json')

    @classmethod
    def init_app(cls, app):
        """Khởi tạo các thư mục cần thiết."""
        uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if uri == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
