"""
Mastery Logic - bucketing of mastery levels for the dashboard.

Pure Python; no database access.
"""
from typing import Mapping

MASTERED_LEVEL = 5


def mastery_breakdown(counts_by_level: Mapping[int, int], total_words: int) -> dict:
    """
    Split the vocabulary into new / learning / mastered.

    ``counts_by_level`` maps mastery level to the number of the learner's
    review states at that level.  Words never admitted to the pool are new;
    admitted words still at level 0 are neither learning nor mastered.

    >>> mastery_breakdown({0: 2, 1: 3, 5: 1}, 10)
    {'new_count': 4, 'learning_count': 3, 'mastered_count': 1}
    """
    mastered = sum(n for level, n in counts_by_level.items() if level >= MASTERED_LEVEL)
    learning = sum(n for level, n in counts_by_level.items() if 1 <= level < MASTERED_LEVEL)
    seen = sum(counts_by_level.values())
    return {
        'new_count': max(0, total_words - seen),
        'learning_count': learning,
        'mastered_count': mastered,
    }
