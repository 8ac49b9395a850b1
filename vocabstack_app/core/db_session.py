"""Commit helper for SQLite-backed sessions.

A writer holding the SQLite lock makes concurrent commits fail with
``database is locked``.  :func:`safe_commit` retries only that failure,
with a doubling delay; every other error is rolled back and re-raised.
"""

import time

from sqlalchemy.exc import OperationalError

COMMIT_ATTEMPTS = 5
FIRST_RETRY_DELAY = 0.1


def safe_commit(session) -> None:
    delay = FIRST_RETRY_DELAY
    for attempt in range(1, COMMIT_ATTEMPTS + 1):
        try:
            session.commit()
            return
        except OperationalError as exc:
            locked = 'database is locked' in str(exc).lower()
            if not locked or attempt == COMMIT_ATTEMPTS:
                session.rollback()
                raise
        time.sleep(delay)
        delay *= 2
