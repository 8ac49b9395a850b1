"""
Vocabulary Interface
====================
Public API for item lookup.  Items are read-only for every other module.
"""

from datetime import date
from typing import Optional

from vocabstack_app.models import Word
from vocabstack_app.utils.time_utils import yesterday_of
from .logics.levels import LEVEL_LABELS, level_label
from .services.word_service import WordService


class VocabularyInterface:
    """Public interface for vocabulary items."""

    @staticmethod
    def get_word(word_id: int) -> Optional[Word]:
        return WordService.get_word(word_id)

    @staticmethod
    def count_words() -> int:
        return WordService.count_words()

    @staticmethod
    def word_of_the_day(day: date) -> Optional[dict]:
        word = WordService.word_for_day(day)
        return VocabularyInterface._with_label(word)

    @staticmethod
    def yesterdays_word(day: date) -> Optional[dict]:
        word = WordService.word_for_day(yesterday_of(day))
        return VocabularyInterface._with_label(word)

    @staticmethod
    def _with_label(word: Optional[Word]) -> Optional[dict]:
        if word is None:
            return None
        data = word.to_dict()
        data['level_label'] = level_label(word.level)
        return data


__all__ = ['LEVEL_LABELS', 'VocabularyInterface']
