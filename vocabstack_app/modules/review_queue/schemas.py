from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class DueCard:
    """A due review state together with the content of its word."""

    review_state_id: int
    word_id: int
    word: str
    definition: str
    part_of_speech: Optional[str]
    example: Optional[str]
    level: Optional[str]
    mastery_level: int
    ease_factor: float
    interval_days: int
    next_review_date: date
    times_seen: int
    times_correct: int
    last_reviewed_date: Optional[date]

    @classmethod
    def from_state(cls, state) -> 'DueCard':
        word = state.word
        return cls(
            review_state_id=state.review_state_id,
            word_id=state.word_id,
            word=word.word,
            definition=word.definition,
            part_of_speech=word.part_of_speech,
            example=word.example,
            level=word.level,
            mastery_level=state.mastery_level,
            ease_factor=state.ease_factor,
            interval_days=state.interval_days,
            next_review_date=state.next_review_date,
            times_seen=state.times_seen,
            times_correct=state.times_correct,
            last_reviewed_date=state.last_reviewed_date,
        )

    def to_dict(self) -> dict:
        return {
            'progress_id': self.review_state_id,
            'word_id': self.word_id,
            'word': self.word,
            'definition': self.definition,
            'part_of_speech': self.part_of_speech,
            'example': self.example,
            'level': self.level,
            'mastery': self.mastery_level,
            'ease_factor': self.ease_factor,
            'interval_days': self.interval_days,
            'next_review': self.next_review_date.isoformat(),
            'times_seen': self.times_seen,
            'times_correct': self.times_correct,
            'last_reviewed': self.last_reviewed_date.isoformat() if self.last_reviewed_date else None,
        }


@dataclass(frozen=True)
class EnqueueResult:
    added: int
    mode: str

    def to_dict(self) -> dict:
        return {'ok': True, 'added': self.added, 'mode': self.mode}
