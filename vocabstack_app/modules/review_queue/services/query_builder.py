# File: vocabstack_app/modules/review_queue/services/query_builder.py
# Helpers for constructing the SQLAlchemy queries behind the review pool.

from sqlalchemy import and_, select

from vocabstack_app.models import ReviewState, Word, WordList, WordListEntry, db


def _owned_collection_word_ids(user_id, collection_id):
    """Subquery of word ids in ``collection_id``, empty unless the learner owns it."""
    return (
        select(WordListEntry.word_id)
        .join(WordList, WordList.list_id == WordListEntry.list_id)
        .where(WordList.list_id == collection_id, WordList.user_id == user_id)
    )


class ReviewStateQueryBuilder:
    """
    Builder for queries over one learner's review states.
    Every query is scoped to ``user_id`` from construction on.
    """

    def __init__(self, user_id):
        self.user_id = user_id
        self._query = ReviewState.query.filter(ReviewState.user_id == user_id)

    def filter_due(self, today):
        """Review states whose next review date has arrived."""
        self._query = self._query.filter(ReviewState.next_review_date <= today)
        return self

    def filter_by_collection(self, collection_id):
        """Restrict to words of a collection owned by the learner."""
        if collection_id is not None:
            self._query = self._query.filter(
                ReviewState.word_id.in_(_owned_collection_word_ids(self.user_id, collection_id))
            )
        return self

    def exclude_ids(self, review_state_ids):
        if review_state_ids:
            self._query = self._query.filter(ReviewState.review_state_id.notin_(review_state_ids))
        return self

    def order_by_due(self):
        """Earliest-overdue first; insertion order breaks ties."""
        self._query = self._query.order_by(
            ReviewState.next_review_date.asc(),
            ReviewState.review_state_id.asc(),
        )
        return self

    def get_query(self):
        return self._query

    def count(self):
        return self._query.count()


class UnreviewedWordQueryBuilder:
    """Builder for words the learner has no review state for yet."""

    def __init__(self, user_id):
        self.user_id = user_id
        self._query = (
            db.session.query(Word.word_id)
            .outerjoin(
                ReviewState,
                and_(ReviewState.word_id == Word.word_id, ReviewState.user_id == user_id),
            )
            .filter(ReviewState.review_state_id.is_(None))
        )

    def filter_by_level(self, level):
        if level:
            self._query = self._query.filter(Word.level == level)
        return self

    def filter_by_collection(self, collection_id):
        if collection_id is not None:
            self._query = self._query.filter(
                Word.word_id.in_(_owned_collection_word_ids(self.user_id, collection_id))
            )
        return self

    def order_by_id(self):
        self._query = self._query.order_by(Word.word_id.asc())
        return self

    def get_query(self):
        return self._query

    def count(self):
        return self._query.count()
