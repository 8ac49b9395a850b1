"""
Streak Logic - Pure functions for streak calculation.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
from datetime import date, timedelta
from typing import NamedTuple, Optional


class StreakUpdate(NamedTuple):
    current_streak: int
    longest_streak: int
    last_study_date: date


def next_streak(last_study_date: Optional[date], current_streak: int, today: date) -> int:
    """
    Streak value after a study session finished on ``today``.

    Examples:
        >>> next_streak(date(2024, 1, 3), 4, today=date(2024, 1, 3))
        4
        >>> next_streak(date(2024, 1, 2), 4, today=date(2024, 1, 3))
        5
        >>> next_streak(date(2024, 1, 1), 4, today=date(2024, 1, 3))
        1
    """
    if last_study_date == today:
        # Already credited today
        return current_streak
    if last_study_date == today - timedelta(days=1):
        return current_streak + 1
    return 1


def apply_session(
    last_study_date: Optional[date],
    current_streak: int,
    longest_streak: int,
    today: date,
) -> StreakUpdate:
    """Streak fields after a finalized session; ``longest`` never drops below ``current``."""
    current = next_streak(last_study_date, current_streak, today)
    return StreakUpdate(
        current_streak=current,
        longest_streak=max(longest_streak, current),
        last_study_date=today,
    )


def is_active_today(last_study_date: Optional[date], today: date) -> bool:
    """True once a session has been finalized today."""
    return last_study_date == today


def displayed_streak(last_study_date: Optional[date], current_streak: int, today: date) -> int:
    """
    Streak as the learner should see it on ``today``.

    The stored value only changes when a session ends, so a streak whose last
    study day is older than yesterday is already broken and shown as 0.
    """
    if last_study_date is None:
        return 0
    if last_study_date >= today - timedelta(days=1):
        return current_streak
    return 0
