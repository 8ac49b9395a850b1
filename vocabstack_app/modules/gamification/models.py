from datetime import datetime, timezone

from vocabstack_app.core.extensions import db


class StudyStreak(db.Model):
    """Mô hình chuỗi ngày học: one row per learner."""

    __tablename__ = 'study_streaks'

    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), primary_key=True
    )
    current_streak = db.Column(db.Integer, nullable=False, default=0)
    longest_streak = db.Column(db.Integer, nullable=False, default=0)
    last_study_date = db.Column(db.Date, nullable=True)
    total_reviewed = db.Column(db.Integer, nullable=False, default=0)
    total_correct = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'current_streak': self.current_streak,
            'longest_streak': self.longest_streak,
            'last_study_date': self.last_study_date.isoformat() if self.last_study_date else None,
            'total_reviewed': self.total_reviewed,
            'total_correct': self.total_correct,
        }

    def __repr__(self):
        return f'<StudyStreak user={self.user_id} current={self.current_streak}>'


class SessionCompletion(db.Model):
    """Ledger of finalized study sessions; a session key is finalized at most once."""

    __tablename__ = 'session_completions'

    completion_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False
    )
    session_key = db.Column(db.String(64), nullable=False)
    reviewed_count = db.Column(db.Integer, nullable=False, default=0)
    correct_count = db.Column(db.Integer, nullable=False, default=0)
    study_date = db.Column(db.Date, nullable=False)
    completed_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        db.UniqueConstraint('user_id', 'session_key', name='uq_session_completion_user_key'),
    )
