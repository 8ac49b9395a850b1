"""
Scheduler - Pure Spaced Repetition Logic

Simplified SM-2 scheduling on whole days.
No database access, no clock access - only calculations based on inputs.

quality: 0 = missed, 2 = hard, 3 = good, 5 = easy
"""

import math
from datetime import date, timedelta
from typing import Any

from ..schemas import SchedulerResult


class SchedulerConstants:
    """Constants for the scheduling algorithm"""
    ALLOWED_QUALITIES = (0, 2, 3, 5)
    PASSING_QUALITY = 3
    MIN_EASE_FACTOR = 1.3
    DEFAULT_EASE_FACTOR = 2.5
    EASE_BONUS = 0.1
    EASE_PENALTY_PER_STEP = 0.08
    MIN_MASTERY = 0
    MAX_MASTERY = 5
    MIN_INTERVAL_DAYS = 1


QUALITY_LABELS = {
    0: 'missed',
    2: 'hard',
    3: 'good',
    5: 'easy',
}


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding: round(2.5) == 2.
    return int(math.floor(value + 0.5))


def compute_next_state(
    quality: int,
    current_interval_days: int,
    current_ease_factor: float,
    current_mastery_level: int,
    today: date,
) -> SchedulerResult:
    """
    Compute the next scheduling state for one answer.

    Args:
        quality: Answer quality, one of 0, 2, 3, 5 (validated by the caller)
        current_interval_days: Interval currently stored on the review state
        current_ease_factor: Ease factor currently stored on the review state
        current_mastery_level: Mastery level currently stored (0-5)
        today: Anchor date; the next review date is counted from it

    Returns:
        SchedulerResult with the new interval, ease factor, review date and mastery
    """
    if quality < SchedulerConstants.PASSING_QUALITY:
        interval_days = SchedulerConstants.MIN_INTERVAL_DAYS
        ease_factor = current_ease_factor
        mastery_level = max(SchedulerConstants.MIN_MASTERY, current_mastery_level - 1)
    else:
        interval_days = max(
            SchedulerConstants.MIN_INTERVAL_DAYS,
            _round_half_up(current_interval_days * current_ease_factor),
        )
        ease_factor = max(
            SchedulerConstants.MIN_EASE_FACTOR,
            current_ease_factor
            + SchedulerConstants.EASE_BONUS
            - (5 - quality) * SchedulerConstants.EASE_PENALTY_PER_STEP,
        )
        # Steps are multiples of 0.02; drop the binary float tail.
        ease_factor = round(ease_factor, 2)
        mastery_level = min(SchedulerConstants.MAX_MASTERY, current_mastery_level + 1)

    return SchedulerResult(
        interval_days=interval_days,
        ease_factor=ease_factor,
        next_review_date=today + timedelta(days=interval_days),
        mastery_level=mastery_level,
    )


def is_correct(quality: int) -> bool:
    """An answer counts as correct from 'good' upwards."""
    return quality >= SchedulerConstants.PASSING_QUALITY


def is_valid_quality(value: Any) -> bool:
    # bool is an int subclass; True must not pass as quality 1.
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        # JSON clients may send 3.0 for 3.
        if not value.is_integer():
            return False
        value = int(value)
    if not isinstance(value, int):
        return False
    return value in SchedulerConstants.ALLOWED_QUALITIES


def quality_from_label(label: str) -> int:
    """Map a button label ('missed', 'hard', 'good', 'easy') to its quality value."""
    normalized = (label or '').strip().lower()
    for quality, name in QUALITY_LABELS.items():
        if name == normalized:
            return quality
    raise KeyError(label)
