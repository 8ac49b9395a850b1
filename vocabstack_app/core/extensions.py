# File: vocabstack_app/core/extensions.py
# Extension singletons, bound to the app in core/bootstrap.py

import sqlite3

from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf import CSRFProtect
from sqlalchemy import event
from sqlalchemy.engine import Engine

SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA busy_timeout=30000;",
    "PRAGMA foreign_keys=ON;",
)

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _configure_sqlite(dbapi_connection, _connection_record):
    # Review logs and list entries rely on ON DELETE CASCADE.
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


# The API answers 401 instead of redirecting to a login page.
login_manager = LoginManager()

csrf_protect = CSRFProtect()
migrate = Migrate()

__all__ = ["db", "login_manager", "csrf_protect", "migrate"]
