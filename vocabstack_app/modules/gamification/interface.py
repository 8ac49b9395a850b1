"""
Gamification Interface
======================
Public API of the streak aggregator.
"""

from datetime import date
from typing import Optional

from .logics.streak_logic import displayed_streak, is_active_today
from .schemas import StreakDTO
from .services.streak_service import StreakService


def finalize_session(
    user_id: int,
    reviewed_count: int,
    correct_count: int,
    today: date,
    session_key: Optional[str] = None,
) -> StreakDTO:
    """Credit a finished session; idempotent per ``session_key``."""
    return StreakService.finalize_session(user_id, reviewed_count, correct_count, today, session_key)


def is_session_finalized(user_id: int, session_key: Optional[str]) -> bool:
    return StreakService.is_session_finalized(user_id, session_key)


def get_streak(user_id: int) -> StreakDTO:
    return StreakService.get_streak(user_id)


def get_streak_summary(user_id: int, today: date) -> dict:
    """
    Streak data for dashboards.  Used by the stats module.

    Returns:
        dict with the stored streak fields plus ``display_streak`` and
        ``studied_today``
    """
    streak = StreakService.get_streak(user_id)
    data = streak.to_dict()
    data['display_streak'] = displayed_streak(streak.last_study_date, streak.current_streak, today)
    data['studied_today'] = is_active_today(streak.last_study_date, today)
    return data
