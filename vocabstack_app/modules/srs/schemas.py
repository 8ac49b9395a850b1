from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class SchedulerResult:
    interval_days: int
    ease_factor: float
    next_review_date: date
    mastery_level: int

    def to_dict(self) -> dict:
        return {
            'interval_days': self.interval_days,
            'ease_factor': self.ease_factor,
            'next_review_date': self.next_review_date.isoformat(),
            'mastery_level': self.mastery_level,
        }
