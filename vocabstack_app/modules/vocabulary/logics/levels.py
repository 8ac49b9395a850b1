"""
Level Logic - difficulty tags of vocabulary items.

Pure Python only; no database access.
"""
from datetime import date
from typing import Optional

LEVEL_LABELS = {
    'grade_6_8': 'Grades 6-8',
    'grade_9_10': 'Grades 9-10',
    'sat': 'SAT / 11-12',
    'gre': 'GRE',
}


def level_label(level: Optional[str]) -> Optional[str]:
    """Display label for a level tag; unknown tags are shown as-is."""
    if not level:
        return None
    return LEVEL_LABELS.get(level, level)


def daily_index(day: date, total: int) -> Optional[int]:
    """
    Position of the word of the day in an id-ordered list of ``total`` words.

    >>> daily_index(date(2024, 1, 1), 10)
    1
    """
    if total <= 0:
        return None
    return day.timetuple().tm_yday % total
