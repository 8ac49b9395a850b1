"""
Tests for the Streak Aggregator

Tests cover:
- Pure streak rules (same day, consecutive day, gap)
- Session finalization totals and longest streak
- Idempotent finalization per session key
- Zero-card sessions and the config switch
"""

from datetime import date, timedelta

import pytest

from vocabstack_app.core.error_handlers import ValidationError
from vocabstack_app.core.signals import session_completed
from vocabstack_app.models import db
from vocabstack_app.modules.gamification import interface as gamification
from vocabstack_app.modules.gamification.logics.streak_logic import (
    apply_session,
    displayed_streak,
    is_active_today,
    next_streak,
)
from vocabstack_app.modules.gamification.models import SessionCompletion, StudyStreak
from vocabstack_app.modules.gamification.services.streak_service import StreakStore

TODAY = date(2024, 3, 10)
YESTERDAY = TODAY - timedelta(days=1)


class TestStreakLogic:

    def test_same_day_keeps_streak(self):
        assert next_streak(TODAY, 4, TODAY) == 4

    def test_consecutive_day_increments(self):
        assert next_streak(YESTERDAY, 4, TODAY) == 5

    def test_gap_resets_to_one(self):
        assert next_streak(TODAY - timedelta(days=2), 4, TODAY) == 1

    def test_first_session(self):
        assert next_streak(None, 0, TODAY) == 1

    def test_longest_never_below_current(self):
        update = apply_session(YESTERDAY, 6, 6, TODAY)
        assert update.current_streak == 7
        assert update.longest_streak == 7
        assert update.last_study_date == TODAY

    def test_display_helpers(self):
        assert is_active_today(TODAY, TODAY)
        assert not is_active_today(YESTERDAY, TODAY)
        assert displayed_streak(YESTERDAY, 3, TODAY) == 3
        assert displayed_streak(TODAY - timedelta(days=3), 3, TODAY) == 0
        assert displayed_streak(None, 0, TODAY) == 0


def _set_streak(user, **fields):
    StreakStore.write_streak_state(user.user_id, fields)
    db.session.commit()


class TestFinalizeSession:

    def test_streak_row_exists_after_registration(self, learner):
        streak = db.session.get(StudyStreak, learner.user_id)
        assert streak is not None
        assert streak.current_streak == 0
        assert streak.last_study_date is None

    def test_first_session(self, learner):
        state = gamification.finalize_session(learner.user_id, 5, 4, TODAY)

        assert state.current_streak == 1
        assert state.longest_streak == 1
        assert state.last_study_date == TODAY
        assert state.total_reviewed == 5
        assert state.total_correct == 4

    def test_yesterday_increments(self, learner):
        _set_streak(learner, current_streak=3, longest_streak=3, last_study_date=YESTERDAY)

        state = gamification.finalize_session(learner.user_id, 2, 2, TODAY)

        assert state.current_streak == 4
        assert state.longest_streak == 4

    def test_same_day_unchanged_but_totals_grow(self, learner):
        _set_streak(learner, current_streak=3, longest_streak=5, last_study_date=TODAY,
                    total_reviewed=10, total_correct=7)

        state = gamification.finalize_session(learner.user_id, 4, 1, TODAY)

        assert state.current_streak == 3
        assert state.total_reviewed == 14
        assert state.total_correct == 8

    def test_gap_keeps_longest(self, learner):
        _set_streak(learner, current_streak=2, longest_streak=7, last_study_date=TODAY - timedelta(days=4))

        state = gamification.finalize_session(learner.user_id, 1, 1, TODAY)

        assert state.current_streak == 1
        assert state.longest_streak == 7

    def test_replayed_session_key_is_ignored(self, learner):
        first = gamification.finalize_session(learner.user_id, 3, 2, TODAY, session_key='abc123')
        replay = gamification.finalize_session(learner.user_id, 3, 2, TODAY, session_key='abc123')

        assert replay == first
        assert replay.total_reviewed == 3
        assert SessionCompletion.query.filter_by(user_id=learner.user_id).count() == 1
        assert gamification.is_session_finalized(learner.user_id, 'abc123')

    def test_without_key_every_call_counts(self, learner):
        """Keyless finalization is at-least-once: a replay is credited again."""
        gamification.finalize_session(learner.user_id, 3, 2, TODAY)
        state = gamification.finalize_session(learner.user_id, 3, 2, TODAY)

        assert state.total_reviewed == 6
        assert state.current_streak == 1

    def test_zero_card_session_counts_by_default(self, learner):
        state = gamification.finalize_session(learner.user_id, 0, 0, TODAY)

        assert state.current_streak == 1
        assert state.last_study_date == TODAY

    def test_zero_card_session_can_be_switched_off(self, app, learner):
        app.config['STREAK_COUNTS_EMPTY_SESSIONS'] = False

        state = gamification.finalize_session(learner.user_id, 0, 0, TODAY, session_key='empty')

        assert state.current_streak == 0
        assert state.last_study_date is None

    @pytest.mark.parametrize('reviewed, correct', [(-1, 0), (2, -1), (2, 3), ('2', 1)])
    def test_invalid_counts(self, learner, reviewed, correct):
        with pytest.raises(ValidationError):
            gamification.finalize_session(learner.user_id, reviewed, correct, TODAY)

        assert db.session.get(StudyStreak, learner.user_id).total_reviewed == 0

    def test_session_completed_signal(self, learner):
        received = []

        def receiver(sender, **kwargs):
            received.append(kwargs)

        with session_completed.connected_to(receiver):
            gamification.finalize_session(learner.user_id, 3, 3, TODAY, session_key='k1')
            gamification.finalize_session(learner.user_id, 3, 3, TODAY, session_key='k1')

        assert len(received) == 1
        assert received[0]['reviewed_count'] == 3
        assert received[0]['current_streak'] == 1

    def test_streak_created_lazily_when_missing(self, learner):
        db.session.delete(db.session.get(StudyStreak, learner.user_id))
        db.session.commit()

        state = gamification.finalize_session(learner.user_id, 1, 0, TODAY)

        assert state.current_streak == 1

    def test_summary_for_dashboard(self, learner):
        gamification.finalize_session(learner.user_id, 4, 3, YESTERDAY)

        summary = gamification.get_streak_summary(learner.user_id, TODAY)

        assert summary['display_streak'] == 1
        assert summary['studied_today'] is False
        assert summary['accuracy'] == 75
