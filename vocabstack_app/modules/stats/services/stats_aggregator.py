# File: vocabstack_app/modules/stats/services/stats_aggregator.py
"""
Stats Aggregator Service
========================
Builds the learner dashboard from the public interfaces of the review
queue, gamification and vocabulary modules.
"""

from datetime import date
from typing import Any, Dict

from vocabstack_app.modules.gamification import interface as gamification_interface
from vocabstack_app.modules.review_queue.interface import ReviewQueueInterface
from vocabstack_app.modules.vocabulary.interface import VocabularyInterface
from ..logics.mastery_logic import mastery_breakdown
from .mastery_service import MasteryService


class StatsAggregator:
    """Single entry point for the unified dashboard stats."""

    @staticmethod
    def get_mastery_breakdown(user_id: int) -> Dict[str, int]:
        return mastery_breakdown(
            MasteryService.counts_by_level(user_id),
            VocabularyInterface.count_words(),
        )

    @staticmethod
    def get_user_dashboard_stats(user_id: int, today: date) -> Dict[str, Any]:
        return {
            'user_id': user_id,
            'due_count': ReviewQueueInterface.count_due(user_id, today),
            'unlearned_count': ReviewQueueInterface.count_unreviewed(user_id),
            'mastery': StatsAggregator.get_mastery_breakdown(user_id),
            'streak': gamification_interface.get_streak_summary(user_id, today),
            'word_of_the_day': VocabularyInterface.word_of_the_day(today),
            'yesterdays_word': VocabularyInterface.yesterdays_word(today),
        }
