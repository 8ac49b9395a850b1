# File: vocabstack_app/modules/review_queue/services/review_store.py
"""
Review Store
============
Persistence operations on review states.  Every read is scoped to the
learner it was asked for.  Methods never commit; the calling service owns
the unit of work.  SQLAlchemy errors propagate unchanged.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import func, select, update

from vocabstack_app.models import ReviewLog, ReviewState, db
from .query_builder import ReviewStateQueryBuilder, UnreviewedWordQueryBuilder


class ReviewStore:
    """Data access for ``ReviewState`` and ``ReviewLog`` rows."""

    @staticmethod
    def get_review_state(user_id: int, word_id: int) -> Optional[ReviewState]:
        return ReviewState.query.filter_by(user_id=user_id, word_id=word_id).first()

    @staticmethod
    def get_owned_review_state(user_id: int, review_state_id: int) -> Optional[ReviewState]:
        """Return the review state only if it belongs to ``user_id``."""
        return ReviewState.query.filter_by(
            review_state_id=review_state_id, user_id=user_id
        ).first()

    @staticmethod
    def upsert_review_state(user_id: int, word_id: int, next_review_date: date) -> bool:
        """
        Create the review state if absent.

        Returns:
            True when a row was added, False when one already existed.
        """
        if ReviewStore.get_review_state(user_id, word_id) is not None:
            return False
        db.session.add(
            ReviewState(
                user_id=user_id,
                word_id=word_id,
                next_review_date=next_review_date,
                mastery_level=0,
                ease_factor=ReviewState.DEFAULT_EASE_FACTOR,
                interval_days=ReviewState.DEFAULT_INTERVAL_DAYS,
                times_seen=0,
                times_correct=0,
            )
        )
        db.session.flush()
        return True

    @staticmethod
    def write_review_result(
        review_state_id: int,
        mastery_level: int,
        ease_factor: float,
        interval_days: int,
        next_review_date: date,
        was_correct: bool,
        today: date,
    ) -> None:
        """Single-statement update of one review state row."""
        db.session.execute(
            update(ReviewState)
            .where(ReviewState.review_state_id == review_state_id)
            .values(
                mastery_level=mastery_level,
                ease_factor=ease_factor,
                interval_days=interval_days,
                next_review_date=next_review_date,
                times_seen=ReviewState.times_seen + 1,
                times_correct=ReviewState.times_correct + (1 if was_correct else 0),
                last_reviewed_date=today,
            )
            .execution_options(synchronize_session='fetch')
        )

    @staticmethod
    def query_due(
        user_id: int,
        today: date,
        collection_id: Optional[int] = None,
        limit: int = 20,
        exclude_ids: Optional[List[int]] = None,
    ) -> List[ReviewState]:
        return (
            ReviewStateQueryBuilder(user_id)
            .filter_due(today)
            .filter_by_collection(collection_id)
            .exclude_ids(exclude_ids)
            .order_by_due()
            .get_query()
            .limit(limit)
            .all()
        )

    @staticmethod
    def count_due(user_id: int, today: date) -> int:
        return ReviewStateQueryBuilder(user_id).filter_due(today).count()

    @staticmethod
    def query_unreviewed(
        user_id: int,
        collection_id: Optional[int] = None,
        level: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[int]:
        """Word ids with no review state for the learner, ordered by id."""
        query = (
            UnreviewedWordQueryBuilder(user_id)
            .filter_by_level(level)
            .filter_by_collection(collection_id)
            .order_by_id()
            .get_query()
        )
        if limit is not None:
            query = query.limit(limit)
        return [row.word_id for row in query.all()]

    @staticmethod
    def count_unreviewed(user_id: int) -> int:
        return UnreviewedWordQueryBuilder(user_id).count()

    @staticmethod
    def query_session_answered(user_id: int, session_key: str) -> List[ReviewState]:
        """Review states answered under ``session_key``, in first-answer order.

        Not scoped to a collection: a card stays in its session once answered.
        """
        first_answer = (
            select(
                ReviewLog.review_state_id.label('review_state_id'),
                func.min(ReviewLog.log_id).label('first_log_id'),
            )
            .where(ReviewLog.user_id == user_id, ReviewLog.session_key == session_key)
            .group_by(ReviewLog.review_state_id)
            .subquery()
        )
        return (
            ReviewStateQueryBuilder(user_id)
            .get_query()
            .join(first_answer, first_answer.c.review_state_id == ReviewState.review_state_id)
            .order_by(first_answer.c.first_log_id.asc())
            .all()
        )

    @staticmethod
    def record_review_log(
        state: ReviewState,
        quality: int,
        is_correct: bool,
        today: date,
        result,
        session_key: Optional[str] = None,
    ) -> ReviewLog:
        """Append the answer to the review log; ``state`` holds the values before the answer."""
        log = ReviewLog(
            user_id=state.user_id,
            review_state_id=state.review_state_id,
            session_key=session_key,
            quality=quality,
            is_correct=is_correct,
            review_date=today,
            interval_before=state.interval_days,
            interval_after=result.interval_days,
            ease_before=state.ease_factor,
            ease_after=result.ease_factor,
            mastery_before=state.mastery_level,
            mastery_after=result.mastery_level,
        )
        db.session.add(log)
        return log
