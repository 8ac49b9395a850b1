from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class StreakDTO:
    user_id: int
    current_streak: int
    longest_streak: int
    last_study_date: Optional[date]
    total_reviewed: int
    total_correct: int

    @classmethod
    def from_model(cls, streak) -> 'StreakDTO':
        return cls(
            user_id=streak.user_id,
            current_streak=streak.current_streak,
            longest_streak=streak.longest_streak,
            last_study_date=streak.last_study_date,
            total_reviewed=streak.total_reviewed,
            total_correct=streak.total_correct,
        )

    @property
    def accuracy(self) -> Optional[int]:
        """Percentage of correct answers over all finalized sessions."""
        if not self.total_reviewed:
            return None
        return int(self.total_correct * 100 / self.total_reviewed + 0.5)

    def to_dict(self) -> dict:
        return {
            'user_id': self.user_id,
            'current_streak': self.current_streak,
            'longest_streak': self.longest_streak,
            'last_study_date': self.last_study_date.isoformat() if self.last_study_date else None,
            'total_reviewed': self.total_reviewed,
            'total_correct': self.total_correct,
            'accuracy': self.accuracy,
        }
