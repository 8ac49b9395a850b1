from typing import Dict

from sqlalchemy import func

from vocabstack_app.models import ReviewState, db


class MasteryService:

    @staticmethod
    def counts_by_level(user_id: int) -> Dict[int, int]:
        """Number of the learner's review states per mastery level."""
        rows = (
            db.session.query(ReviewState.mastery_level, func.count(ReviewState.review_state_id))
            .filter(ReviewState.user_id == user_id)
            .group_by(ReviewState.mastery_level)
            .all()
        )
        return {level: count for level, count in rows}
