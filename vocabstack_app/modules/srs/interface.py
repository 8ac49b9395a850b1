"""
SRS Interface
=============
Public API of the scheduler.  Other modules go through this interface and
never import the logic module directly.
"""

from datetime import date
from typing import Any

from vocabstack_app.core.error_handlers import ValidationError
from .logics.scheduler import (
    QUALITY_LABELS,
    SchedulerConstants,
    compute_next_state as _compute_next_state,
    is_correct,
    is_valid_quality,
    quality_from_label,
)
from .schemas import SchedulerResult


def validate_quality(value: Any) -> int:
    """Return ``value`` as an int if it is an accepted quality, raise ``ValidationError`` otherwise."""
    if not is_valid_quality(value):
        raise ValidationError(
            'Quality must be one of 0, 2, 3, 5',
            errors={'quality': value},
        )
    return int(value)


def compute_next_state(
    quality: int,
    current_interval_days: int,
    current_ease_factor: float,
    current_mastery_level: int,
    today: date,
) -> SchedulerResult:
    return _compute_next_state(
        quality, current_interval_days, current_ease_factor, current_mastery_level, today
    )


__all__ = [
    'QUALITY_LABELS',
    'SchedulerConstants',
    'SchedulerResult',
    'compute_next_state',
    'is_correct',
    'quality_from_label',
    'validate_quality',
]
