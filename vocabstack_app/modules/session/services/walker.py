# File: vocabstack_app/modules/session/services/walker.py
"""
Session Walker
==============
Drives one study session over the learner's due cards.

The walker never stores the session: every call receives the cursor the
client sent back and returns the next one.  Each answer is written and
committed on its own; the running totals in the cursor are only credited to
the streak when the session completes, once per session key.
"""

import secrets
from datetime import date
from typing import Mapping, Optional

from flask import current_app

from vocabstack_app.core.db_session import safe_commit
from vocabstack_app.core.error_handlers import NotFoundError, ValidationError
from vocabstack_app.core.extensions import db
from vocabstack_app.core.signals import card_reviewed
from vocabstack_app.modules.collections.interface import CollectionInterface
from vocabstack_app.modules.gamification import interface as gamification
from vocabstack_app.modules.review_queue.interface import ReviewQueueInterface
from vocabstack_app.modules.srs.interface import compute_next_state, is_correct, validate_quality
from vocabstack_app.utils.validators import (
    validate_identifier,
    validate_optional_identifier,
    validate_session_counts,
)
from ..logics.session_logic import (
    Completed,
    InProgress,
    SessionCursor,
    SessionState,
    after_answer,
    begin,
    resolve,
)

DEFAULT_SESSION_LIMIT = 20


class SessionWalker:
    """Answer/advance transitions of the study session state machine."""

    @staticmethod
    def _session_limit() -> int:
        return current_app.config.get('STUDY_SESSION_LIMIT', DEFAULT_SESSION_LIMIT)

    @staticmethod
    def new_session_key() -> str:
        return secrets.token_hex(16)

    @staticmethod
    def parse_cursor(args: Mapping) -> SessionCursor:
        """Cursor from request values; malformed values are a ``ValidationError``."""
        try:
            cursor = SessionCursor.from_query_args(args)
        except ValueError as e:
            raise ValidationError(str(e))
        SessionWalker.validate_cursor(cursor)
        return cursor

    @staticmethod
    def validate_cursor(cursor: SessionCursor) -> None:
        if isinstance(cursor.position, bool) or not isinstance(cursor.position, int) or cursor.position < 0:
            raise ValidationError('card must be a non-negative integer', errors={'card': cursor.position})
        validate_session_counts(cursor.reviewed_count, cursor.correct_count)
        validate_optional_identifier(cursor.collection_id, 'listId')
        if cursor.session_key is not None and len(cursor.session_key) > 64:
            raise ValidationError('Invalid session key')

    @staticmethod
    def check_collection(user_id: int, collection_id: Optional[int]) -> None:
        """Raise ``NotFoundError`` unless the session's list, if any, is the learner's."""
        if collection_id is not None:
            CollectionInterface.get_collection(user_id, collection_id)

    @staticmethod
    def build_deck(user_id: int, today: date, cursor: SessionCursor):
        return ReviewQueueInterface.select_session_deck(
            user_id,
            today,
            session_key=cursor.session_key,
            collection_id=cursor.collection_id,
            limit=SessionWalker._session_limit(),
        )

    @staticmethod
    def begin_session(user_id: int, today: date, collection_id: Optional[int] = None) -> SessionState:
        """
        Start a session over the learner's due cards (optionally one list).

        Returns ``InProgress`` on the first card, or ``Completed`` without a
        streak when nothing is due; no session was walked in that case.
        """
        validate_identifier(user_id, 'user_id')
        validate_optional_identifier(collection_id, 'listId')
        SessionWalker.check_collection(user_id, collection_id)

        cursor = begin(collection_id=collection_id, session_key=SessionWalker.new_session_key())
        deck = SessionWalker.build_deck(user_id, today, cursor)
        state = resolve(cursor, len(deck))
        if isinstance(state, InProgress):
            current_app.logger.info(
                f"[Session] User {user_id} started session {cursor.session_key} with {len(deck)} card(s)"
            )
            return InProgress(cursor, card=deck[cursor.position], deck_size=len(deck))
        return state

    @staticmethod
    def answer(
        user_id: int,
        cursor: SessionCursor,
        review_state_id: int,
        quality: int,
        today: date,
    ) -> SessionCursor:
        """
        Apply one answer and return the advanced cursor.

        Raises:
            ValidationError: bad quality, identifier or cursor values
            NotFoundError: the review state or the session's list is missing or not the learner's
        """
        validate_identifier(user_id, 'user_id')
        SessionWalker.validate_cursor(cursor)
        quality = validate_quality(quality)
        validate_identifier(review_state_id, 'progressId')
        SessionWalker.check_collection(user_id, cursor.collection_id)

        state = ReviewQueueInterface.get_owned_review_state(user_id, review_state_id)
        if state is None:
            raise NotFoundError('Review state not found', resource='review_state')

        result = compute_next_state(
            quality, state.interval_days, state.ease_factor, state.mastery_level, today
        )
        was_correct = is_correct(quality)

        try:
            ReviewQueueInterface.record_answer(
                state, quality, was_correct, result, today, session_key=cursor.session_key
            )
            safe_commit(db.session)
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(
                f"[Session] Error saving answer for review state {review_state_id}: {e}", exc_info=True
            )
            raise

        card_reviewed.send(
            None,
            user_id=user_id,
            review_state_id=review_state_id,
            word_id=state.word_id,
            quality=quality,
            is_correct=was_correct,
            interval_days=result.interval_days,
            mastery_level=result.mastery_level,
            session_key=cursor.session_key,
        )
        return after_answer(cursor, quality)

    @staticmethod
    def advance(user_id: int, cursor: SessionCursor, today: date) -> SessionState:
        """
        Re-snapshot the deck and move to the card at ``cursor.position``.

        Past the end of the deck the session is completed and finalized into
        the streak, once per session key.
        """
        validate_identifier(user_id, 'user_id')
        SessionWalker.validate_cursor(cursor)
        SessionWalker.check_collection(user_id, cursor.collection_id)

        deck = SessionWalker.build_deck(user_id, today, cursor)
        state = resolve(cursor, len(deck))
        if isinstance(state, InProgress):
            return InProgress(cursor, card=deck[cursor.position], deck_size=len(deck))

        if gamification.is_session_finalized(user_id, cursor.session_key):
            return Completed(cursor, streak=gamification.get_streak(user_id), already_finalized=True)

        streak = gamification.finalize_session(
            user_id,
            cursor.reviewed_count,
            cursor.correct_count,
            today,
            session_key=cursor.session_key,
        )
        return Completed(cursor, streak=streak)
