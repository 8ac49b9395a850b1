"""Input validators shared by the module interfaces.

Each validator returns the normalised value or raises ``ValidationError``
before anything touches the database.
"""
from typing import Any, Optional

from vocabstack_app.core.error_handlers import ValidationError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_identifier(value: Any, name: str = 'id') -> int:
    """Database identifiers are positive integers."""
    if not _is_int(value) or value <= 0:
        raise ValidationError(f'Invalid {name}', errors={name: value})
    return value


def validate_optional_identifier(value: Any, name: str = 'id') -> Optional[int]:
    if value is None:
        return None
    return validate_identifier(value, name)


def validate_positive_count(value: Any, name: str = 'count') -> int:
    if not _is_int(value) or value <= 0:
        raise ValidationError(f'{name} must be a positive integer', errors={name: value})
    return value


def validate_session_counts(reviewed_count: Any, correct_count: Any) -> None:
    """Running totals are non-negative and correct never exceeds reviewed."""
    if not _is_int(reviewed_count) or reviewed_count < 0:
        raise ValidationError('reviewed must be a non-negative integer', errors={'reviewed': reviewed_count})
    if not _is_int(correct_count) or correct_count < 0:
        raise ValidationError('correct must be a non-negative integer', errors={'correct': correct_count})
    if correct_count > reviewed_count:
        raise ValidationError(
            'correct cannot exceed reviewed',
            errors={'reviewed': reviewed_count, 'correct': correct_count},
        )
