# File: vocabstack_app/modules/gamification/services/streak_service.py
"""
Streak Service
==============
Manages learner study streaks (consecutive calendar days with a finalized
study session) and the lifetime review totals.
"""

from datetime import date
from typing import Mapping, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from vocabstack_app.core.db_session import safe_commit
from vocabstack_app.core.extensions import db
from vocabstack_app.core.signals import session_completed
from vocabstack_app.utils.validators import validate_identifier, validate_session_counts
from ..logics.streak_logic import apply_session
from ..models import SessionCompletion, StudyStreak
from ..schemas import StreakDTO

STREAK_FIELDS = (
    'current_streak',
    'longest_streak',
    'last_study_date',
    'total_reviewed',
    'total_correct',
)


class StreakStore:
    """Data access for ``StudyStreak`` rows.  Never commits."""

    @staticmethod
    def get_streak_state(user_id: int) -> StudyStreak:
        """Get the streak record for a learner, creating an empty one if missing."""
        streak = db.session.get(StudyStreak, user_id)
        if streak is None:
            streak = StudyStreak(
                user_id=user_id,
                current_streak=0,
                longest_streak=0,
                total_reviewed=0,
                total_correct=0,
            )
            db.session.add(streak)
            db.session.flush()
        return streak

    @staticmethod
    def write_streak_state(user_id: int, fields: Mapping) -> StudyStreak:
        unknown = set(fields) - set(STREAK_FIELDS)
        if unknown:
            raise KeyError(f"Unknown streak fields: {sorted(unknown)}")
        streak = StreakStore.get_streak_state(user_id)
        for name, value in fields.items():
            setattr(streak, name, value)
        return streak


class StreakService:
    """Service for finalizing study sessions into the streak record."""

    @staticmethod
    def get_streak(user_id: int) -> StreakDTO:
        streak = StreakStore.get_streak_state(user_id)
        safe_commit(db.session)
        return StreakDTO.from_model(streak)

    @staticmethod
    def is_session_finalized(user_id: int, session_key: Optional[str]) -> bool:
        if not session_key:
            return False
        return (
            SessionCompletion.query.filter_by(user_id=user_id, session_key=session_key).first()
            is not None
        )

    @staticmethod
    def finalize_session(
        user_id: int,
        reviewed_count: int,
        correct_count: int,
        today: date,
        session_key: Optional[str] = None,
    ) -> StreakDTO:
        """
        Credit one finished study session to the learner's streak.

        - last study day == today: streak unchanged
        - last study day == yesterday: streak + 1
        - otherwise: streak restarts at 1

        With a ``session_key`` the call is idempotent: a replayed key returns the
        current state untouched.  Without one, every call is credited.
        """
        validate_identifier(user_id, 'user_id')
        validate_session_counts(reviewed_count, correct_count)

        if StreakService.is_session_finalized(user_id, session_key):
            current_app.logger.warning(
                f"[Streak] Session {session_key} of user {user_id} already finalized, ignoring replay"
            )
            return StreakService.get_streak(user_id)

        try:
            streak = StreakStore.get_streak_state(user_id)
            counts_as_study_day = reviewed_count > 0 or current_app.config.get(
                'STREAK_COUNTS_EMPTY_SESSIONS', True
            )
            if counts_as_study_day:
                update = apply_session(
                    streak.last_study_date, streak.current_streak, streak.longest_streak, today
                )
                StreakStore.write_streak_state(user_id, {
                    'current_streak': update.current_streak,
                    'longest_streak': update.longest_streak,
                    'last_study_date': update.last_study_date,
                    'total_reviewed': streak.total_reviewed + reviewed_count,
                    'total_correct': streak.total_correct + correct_count,
                })

            if session_key:
                db.session.add(SessionCompletion(
                    user_id=user_id,
                    session_key=session_key,
                    reviewed_count=reviewed_count,
                    correct_count=correct_count,
                    study_date=today,
                ))
            safe_commit(db.session)
        except IntegrityError:
            # A concurrent request finalized the same session key first.
            db.session.rollback()
            current_app.logger.warning(
                f"[Streak] Session {session_key} of user {user_id} finalized concurrently"
            )
            return StreakService.get_streak(user_id)
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"[Streak] Error finalizing session for user {user_id}: {e}", exc_info=True)
            raise

        result = StreakDTO.from_model(streak)
        current_app.logger.info(
            f"[Streak] User {user_id} finished a session: reviewed={reviewed_count} "
            f"correct={correct_count} streak={result.current_streak}"
        )
        session_completed.send(
            None,
            user_id=user_id,
            reviewed_count=reviewed_count,
            correct_count=correct_count,
            current_streak=result.current_streak,
            session_key=session_key,
        )
        return result
