"""
Tests for the Session Walker

Tests cover:
- Pure cursor transitions
- A full answer/advance walk over a three-card deck
- Exactly-once finalization per session
- Ownership and validation failures
- The weak-consistency boundary between concurrent sessions
"""

from datetime import timedelta

import pytest

from vocabstack_app.core.error_handlers import NotFoundError, ValidationError
from vocabstack_app.core.signals import card_reviewed, session_completed
from vocabstack_app.models import ReviewLog, ReviewState, db
from vocabstack_app.modules.collections.services.collection_service import CollectionService
from vocabstack_app.modules.gamification.models import SessionCompletion, StudyStreak
from vocabstack_app.modules.review_queue.interface import ReviewQueueInterface
from vocabstack_app.modules.session.interface import SessionInterface
from vocabstack_app.modules.session.logics.session_logic import (
    Completed,
    InProgress,
    SessionCursor,
    after_answer,
    begin,
    resolve,
)

from conftest import make_review_state


class TestSessionLogic:

    def test_begin_is_zeroed(self):
        cursor = begin(collection_id=7, session_key='k')
        assert (cursor.position, cursor.reviewed_count, cursor.correct_count) == (0, 0, 0)
        assert cursor.collection_id == 7

    def test_after_answer_counts_correct_from_good(self):
        cursor = after_answer(begin(), 3)
        cursor = after_answer(cursor, 2)

        assert cursor.position == 2
        assert cursor.reviewed_count == 2
        assert cursor.correct_count == 1

    def test_resolve(self):
        assert isinstance(resolve(SessionCursor(position=2), 3), InProgress)
        assert isinstance(resolve(SessionCursor(position=3), 3), Completed)
        assert isinstance(resolve(SessionCursor(position=0), 0), Completed)

    def test_query_args_round_trip(self):
        cursor = SessionCursor(2, 2, 1, collection_id=4, session_key='abc')
        args = {key: str(value) for key, value in cursor.to_query_args().items()}

        assert SessionCursor.from_query_args(args) == cursor

    def test_defaults_when_args_missing(self):
        assert SessionCursor.from_query_args({}) == SessionCursor()

    def test_junk_args_rejected(self):
        with pytest.raises(ValueError):
            SessionCursor.from_query_args({'card': 'two'})


def _walk(user, cursor, today, quality=3):
    """Answer the card at the cursor, then advance."""
    state = SessionInterface.advance(user.user_id, cursor, today)
    assert isinstance(state, InProgress)
    cursor = SessionInterface.answer(user.user_id, cursor, state.card.review_state_id, quality, today)
    return cursor, SessionInterface.advance(user.user_id, cursor, today)


class TestSessionWalk:

    def test_three_card_deck_completes_after_three_cycles(self, learner, words, today):
        ReviewQueueInterface.enqueue_new(learner.user_id, 3, today)
        finalized = []

        def receiver(sender, **kwargs):
            finalized.append(kwargs)

        state = SessionInterface.begin_session(learner.user_id, today)
        assert isinstance(state, InProgress)
        assert state.deck_size == 3
        assert state.card.word == 'abate'

        cursor = state.cursor
        seen = []
        with session_completed.connected_to(receiver):
            for _ in range(3):
                seen.append(SessionInterface.advance(learner.user_id, cursor, today).card.word)
                cursor, state = _walk(learner, cursor, today, quality=3)

        assert seen == ['abate', 'benevolent', 'candid']
        assert cursor.position == 3
        assert isinstance(state, Completed)
        assert state.already_finalized is False
        assert state.streak.current_streak == 1
        assert state.streak.total_reviewed == 3
        assert state.streak.total_correct == 3
        assert len(finalized) == 1
        assert finalized[0]['reviewed_count'] == 3

    def test_replayed_completion_is_not_credited_twice(self, learner, words, today):
        ReviewQueueInterface.enqueue_new(learner.user_id, 1, today)
        cursor = SessionInterface.begin_session(learner.user_id, today).cursor
        cursor, done = _walk(learner, cursor, today)
        assert isinstance(done, Completed)

        replay = SessionInterface.advance(learner.user_id, cursor, today)

        assert isinstance(replay, Completed)
        assert replay.already_finalized is True
        assert replay.streak.total_reviewed == 1
        assert db.session.get(StudyStreak, learner.user_id).total_reviewed == 1

    def test_answer_writes_review_state_and_log(self, learner, words, today):
        state = make_review_state(learner, words[0], today, interval_days=1, ease_factor=2.5)
        cursor = SessionInterface.begin_session(learner.user_id, today).cursor

        next_cursor = SessionInterface.answer(learner.user_id, cursor, state.review_state_id, 3, today)

        db.session.refresh(state)
        assert next_cursor.reviewed_count == 1
        assert next_cursor.correct_count == 1
        assert state.interval_days == 3
        assert state.ease_factor == pytest.approx(2.44)
        assert state.mastery_level == 1
        assert state.next_review_date == today + timedelta(days=3)
        assert state.times_seen == 1
        assert state.times_correct == 1
        assert state.last_reviewed_date == today

        log = ReviewLog.query.filter_by(review_state_id=state.review_state_id).one()
        assert log.session_key == cursor.session_key
        assert (log.interval_before, log.interval_after) == (1, 3)
        assert log.is_correct is True

    def test_missed_answer_counts_as_reviewed_only(self, learner, words, today):
        state = make_review_state(learner, words[0], today, mastery_level=3, interval_days=6, ease_factor=2.0)
        cursor = SessionInterface.begin_session(learner.user_id, today).cursor

        next_cursor = SessionInterface.answer(learner.user_id, cursor, state.review_state_id, 0, today)

        db.session.refresh(state)
        assert (next_cursor.reviewed_count, next_cursor.correct_count) == (1, 0)
        assert state.times_seen == 1
        assert state.times_correct == 0
        assert state.mastery_level == 2

    def test_card_reviewed_signal(self, learner, words, today):
        state = make_review_state(learner, words[0], today)
        received = []

        def receiver(sender, **kwargs):
            received.append(kwargs)

        with card_reviewed.connected_to(receiver):
            SessionInterface.answer(learner.user_id, SessionCursor(), state.review_state_id, 5, today)

        assert received[0]['word_id'] == words[0].word_id
        assert received[0]['is_correct'] is True

    def test_collection_session(self, learner, words, today):
        collection = CollectionService.create_collection(learner.user_id, 'Short list')
        CollectionService.add_word_to_collection(learner.user_id, collection.list_id, words[2].word_id)
        ReviewQueueInterface.enqueue_new(learner.user_id, 3, today)

        state = SessionInterface.begin_session(learner.user_id, today, collection.list_id)

        assert state.deck_size == 1
        assert state.card.word == 'candid'
        assert state.cursor.collection_id == collection.list_id

    def test_session_limit_from_config(self, app, learner, words, today):
        app.config['STUDY_SESSION_LIMIT'] = 2
        ReviewQueueInterface.enqueue_new(learner.user_id, 5, today)

        assert SessionInterface.begin_session(learner.user_id, today).deck_size == 2


class TestSessionEdges:

    def test_nothing_due_does_not_touch_streak(self, learner, words, today):
        make_review_state(learner, words[0], today + timedelta(days=4))

        state = SessionInterface.begin_session(learner.user_id, today)

        assert isinstance(state, Completed)
        assert state.streak is None
        assert db.session.get(StudyStreak, learner.user_id).last_study_date is None

    def test_advance_on_empty_deck_finalizes_zero_card_session(self, learner, today):
        state = SessionInterface.advance(learner.user_id, SessionCursor(session_key='empty'), today)

        assert isinstance(state, Completed)
        assert state.streak.current_streak == 1
        assert state.streak.total_reviewed == 0

    def test_foreign_review_state_is_not_found(self, learner, other_learner, words, today):
        foreign = make_review_state(other_learner, words[0], today)

        with pytest.raises(NotFoundError) as foreign_error:
            SessionInterface.answer(learner.user_id, SessionCursor(), foreign.review_state_id, 3, today)
        with pytest.raises(NotFoundError) as missing_error:
            SessionInterface.answer(learner.user_id, SessionCursor(), 987654, 3, today)

        assert foreign_error.value.message == missing_error.value.message == 'Review state not found'
        db.session.refresh(foreign)
        assert foreign.times_seen == 0

    @pytest.mark.parametrize('quality', [1, 4, '3', None, True])
    def test_invalid_quality_writes_nothing(self, learner, words, today, quality):
        state = make_review_state(learner, words[0], today)

        with pytest.raises(ValidationError):
            SessionInterface.answer(learner.user_id, SessionCursor(), state.review_state_id, quality, today)

        db.session.refresh(state)
        assert state.times_seen == 0
        assert ReviewLog.query.count() == 0

    def test_integral_float_quality_is_recorded_as_int(self, learner, words, today):
        state = make_review_state(learner, words[0], today)

        cursor = SessionInterface.answer(learner.user_id, SessionCursor(), state.review_state_id, 3.0, today)

        assert cursor.correct_count == 1
        assert ReviewLog.query.one().quality == 3

    @pytest.mark.parametrize('cursor', [
        SessionCursor(position=-1),
        SessionCursor(reviewed_count=-1),
        SessionCursor(position=1, reviewed_count=1, correct_count=2),
    ])
    def test_invalid_cursor(self, learner, words, today, cursor):
        state = make_review_state(learner, words[0], today)

        with pytest.raises(ValidationError):
            SessionInterface.answer(learner.user_id, cursor, state.review_state_id, 3, today)

    def test_parse_cursor_reports_validation_error(self):
        with pytest.raises(ValidationError):
            SessionInterface.parse_cursor({'reviewed': 'x'})

    def test_foreign_collection_cannot_start_session(self, learner, other_learner, today):
        foreign = CollectionService.create_collection(other_learner.user_id, 'Theirs')

        with pytest.raises(NotFoundError):
            SessionInterface.begin_session(learner.user_id, today, foreign.list_id)

    def test_foreign_or_missing_collection_cannot_complete_session(self, learner, other_learner, today):
        foreign = CollectionService.create_collection(other_learner.user_id, 'Theirs')

        for list_id in (foreign.list_id, 99999):
            cursor = SessionCursor(position=3, reviewed_count=3, correct_count=3,
                                   collection_id=list_id, session_key='k1')
            with pytest.raises(NotFoundError):
                SessionInterface.advance(learner.user_id, cursor, today)

        streak = db.session.get(StudyStreak, learner.user_id)
        assert streak.last_study_date is None
        assert streak.total_reviewed == 0
        assert SessionCompletion.query.count() == 0

    def test_foreign_collection_cannot_record_answer(self, learner, other_learner, words, today):
        foreign = CollectionService.create_collection(other_learner.user_id, 'Theirs')
        state = make_review_state(learner, words[0], today)
        cursor = SessionCursor(collection_id=foreign.list_id, session_key='k1')

        with pytest.raises(NotFoundError):
            SessionInterface.answer(learner.user_id, cursor, state.review_state_id, 3, today)

        db.session.refresh(state)
        assert state.times_seen == 0
        assert ReviewLog.query.count() == 0

    def test_word_removed_from_list_mid_session_keeps_deck_positions(self, learner, words, today):
        collection = CollectionService.create_collection(learner.user_id, 'Shrinking')
        for word in words[:3]:
            CollectionService.add_word_to_collection(learner.user_id, collection.list_id, word.word_id)
        ReviewQueueInterface.enqueue_collection(learner.user_id, collection.list_id, today)

        state = SessionInterface.begin_session(learner.user_id, today, collection.list_id)
        assert state.card.word_id == words[0].word_id
        cursor = SessionInterface.answer(
            learner.user_id, state.cursor, state.card.review_state_id, 5, today
        )
        CollectionService.remove_word_from_collection(learner.user_id, collection.list_id, words[0].word_id)

        state = SessionInterface.advance(learner.user_id, cursor, today)

        assert isinstance(state, InProgress)
        assert state.card.word_id == words[1].word_id
        assert state.deck_size == 3


class TestConcurrentSessions:

    def test_two_sessions_both_count_the_same_card(self, learner, words, today):
        """
        Per-card writes are independent of session totals: two sessions over
        the same due card each report it, and both totals are credited.
        """
        ReviewQueueInterface.enqueue_new(learner.user_id, 1, today)
        first = SessionInterface.begin_session(learner.user_id, today)
        second = SessionInterface.begin_session(learner.user_id, today)
        card_id = first.card.review_state_id
        assert second.card.review_state_id == card_id

        cursor_a = SessionInterface.answer(learner.user_id, first.cursor, card_id, 3, today)
        cursor_b = SessionInterface.answer(learner.user_id, second.cursor, card_id, 3, today)
        SessionInterface.advance(learner.user_id, cursor_a, today)
        done = SessionInterface.advance(learner.user_id, cursor_b, today)

        state = db.session.get(ReviewState, card_id)
        assert state.times_seen == 2
        assert done.streak.total_reviewed == 2
        assert ReviewLog.query.filter_by(review_state_id=card_id).count() == 2
