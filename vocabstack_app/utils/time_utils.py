"""
Centralized Utilities for Date Handling in VocabStack.

Scheduling works on whole calendar days.  The only place that reads the
clock is :func:`local_today`; every date-sensitive operation below the
routes receives ``today`` as an argument.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional

import pytz
from flask import current_app, has_app_context


def utcnow() -> datetime:
    """
    Get the current timezone-aware UTC datetime.
    Always use this instead of datetime.utcnow() or datetime.now().
    """
    return datetime.now(timezone.utc)


def local_today(tz_name: Optional[str] = None) -> date:
    """
    Current calendar date in ``tz_name``.

    Falls back to the ``SYSTEM_TIMEZONE`` config value, then to UTC.
    """
    if tz_name is None and has_app_context():
        tz_name = current_app.config.get('SYSTEM_TIMEZONE', 'UTC')
    try:
        tz = pytz.timezone(tz_name or 'UTC')
    except pytz.UnknownTimeZoneError:
        tz = pytz.UTC
    return utcnow().astimezone(tz).date()


def yesterday_of(day: date) -> date:
    return day - timedelta(days=1)

