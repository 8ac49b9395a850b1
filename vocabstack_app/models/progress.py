"""Per-learner review scheduling records.

``ReviewState`` holds the memory-strength record of one learner for one
word.  It is created lazily when the word is admitted to the review pool and
afterwards only mutated through the answer write.  ``ReviewLog`` keeps one
row per recorded answer.
"""

from __future__ import annotations

from datetime import datetime, timezone

from ..core.extensions import db


class ReviewState(db.Model):
    """Scheduling state of one (learner, word) pair."""

    __tablename__ = 'review_states'

    DEFAULT_EASE_FACTOR = 2.5
    DEFAULT_INTERVAL_DAYS = 1

    review_state_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False
    )
    word_id = db.Column(db.Integer, db.ForeignKey('words.word_id'), nullable=False)

    mastery_level = db.Column(db.Integer, nullable=False, default=0)
    ease_factor = db.Column(db.Float, nullable=False, default=DEFAULT_EASE_FACTOR)
    interval_days = db.Column(db.Integer, nullable=False, default=DEFAULT_INTERVAL_DAYS)
    next_review_date = db.Column(db.Date, nullable=False)
    times_seen = db.Column(db.Integer, nullable=False, default=0)
    times_correct = db.Column(db.Integer, nullable=False, default=0)
    last_reviewed_date = db.Column(db.Date, nullable=True)

    word = db.relationship('Word', lazy='joined')

    __table_args__ = (
        db.UniqueConstraint('user_id', 'word_id', name='uq_review_state_user_word'),
        db.Index('ix_review_states_user_next_review', 'user_id', 'next_review_date'),
    )

    def to_dict(self) -> dict:
        return {
            'review_state_id': self.review_state_id,
            'user_id': self.user_id,
            'word_id': self.word_id,
            'mastery_level': self.mastery_level,
            'ease_factor': self.ease_factor,
            'interval_days': self.interval_days,
            'next_review_date': self.next_review_date.isoformat() if self.next_review_date else None,
            'times_seen': self.times_seen,
            'times_correct': self.times_correct,
            'last_reviewed_date': self.last_reviewed_date.isoformat() if self.last_reviewed_date else None,
        }

    def __repr__(self):
        return f'<ReviewState user={self.user_id} word={self.word_id} next={self.next_review_date}>'


class ReviewLog(db.Model):
    """One recorded answer, with the scheduling values before and after."""

    __tablename__ = 'review_logs'

    log_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False
    )
    review_state_id = db.Column(
        db.Integer, db.ForeignKey('review_states.review_state_id', ondelete='CASCADE'), nullable=False
    )
    session_key = db.Column(db.String(64), nullable=True, index=True)

    quality = db.Column(db.Integer, nullable=False)
    is_correct = db.Column(db.Boolean, nullable=False, default=False)
    review_date = db.Column(db.Date, nullable=False)
    reviewed_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    interval_before = db.Column(db.Integer)
    interval_after = db.Column(db.Integer)
    ease_before = db.Column(db.Float)
    ease_after = db.Column(db.Float)
    mastery_before = db.Column(db.Integer)
    mastery_after = db.Column(db.Integer)

    __table_args__ = (
        db.Index('ix_review_logs_user_session', 'user_id', 'session_key'),
    )
