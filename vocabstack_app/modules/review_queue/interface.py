"""
Review Queue Interface
======================
Public API for other modules to read the due set and to admit words into
the review pool.  All cross-module queue operations go through here.
"""

from datetime import date
from typing import List, Optional

from vocabstack_app.models import ReviewState
from .schemas import DueCard, EnqueueResult
from .services import DEFAULT_DUE_LIMIT, DueSelector, QueueEnqueuer, ReviewStore


class ReviewQueueInterface:
    """Public interface for review queue operations."""

    @staticmethod
    def select_due(
        user_id: int,
        today: date,
        collection_id: Optional[int] = None,
        limit: int = DEFAULT_DUE_LIMIT,
    ) -> List[DueCard]:
        return DueSelector.select_due(user_id, today, collection_id=collection_id, limit=limit)

    @staticmethod
    def count_due(user_id: int, today: date) -> int:
        return DueSelector.count_due(user_id, today)

    @staticmethod
    def enqueue_item(user_id: int, word_id: int, today: date) -> EnqueueResult:
        return QueueEnqueuer.enqueue_item(user_id, word_id, today)

    @staticmethod
    def enqueue_new(user_id: int, count: int, today: date, level: Optional[str] = None) -> EnqueueResult:
        return QueueEnqueuer.enqueue_new(user_id, count, today, level=level)

    @staticmethod
    def enqueue_collection(user_id: int, collection_id: int, today: date) -> EnqueueResult:
        return QueueEnqueuer.enqueue_collection(user_id, collection_id, today)

    @staticmethod
    def count_unreviewed(user_id: int) -> int:
        return QueueEnqueuer.count_unreviewed(user_id)

    @staticmethod
    def select_session_deck(
        user_id: int,
        today: date,
        session_key: Optional[str] = None,
        collection_id: Optional[int] = None,
        limit: int = DEFAULT_DUE_LIMIT,
    ) -> List[DueCard]:
        return DueSelector.select_session_deck(
            user_id, today, session_key=session_key, collection_id=collection_id, limit=limit
        )

    # -- answer writes (used by the session walker) --

    @staticmethod
    def get_owned_review_state(user_id: int, review_state_id: int) -> Optional[ReviewState]:
        return ReviewStore.get_owned_review_state(user_id, review_state_id)

    @staticmethod
    def record_answer(
        state: ReviewState,
        quality: int,
        was_correct: bool,
        result,
        today: date,
        session_key: Optional[str] = None,
    ) -> None:
        """Log the answer and write the new schedule onto ``state`` (no commit)."""
        ReviewStore.record_review_log(state, quality, was_correct, today, result, session_key=session_key)
        ReviewStore.write_review_result(
            state.review_state_id,
            result.mastery_level,
            result.ease_factor,
            result.interval_days,
            result.next_review_date,
            was_correct,
            today,
        )
