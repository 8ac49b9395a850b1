from datetime import date
from typing import List, Optional

from vocabstack_app.utils.validators import (
    validate_identifier,
    validate_optional_identifier,
    validate_positive_count,
)
from ..schemas import DueCard
from .review_store import ReviewStore

DEFAULT_DUE_LIMIT = 20


class DueSelector:
    """Builds the bounded, ordered list of review states that are due."""

    @staticmethod
    def select_due(
        user_id: int,
        today: date,
        collection_id: Optional[int] = None,
        limit: int = DEFAULT_DUE_LIMIT,
    ) -> List[DueCard]:
        """
        Return the learner's due cards, earliest-overdue first.

        Args:
            user_id: Learner whose review states are read
            today: Cards with next_review_date <= today are due
            collection_id: Optional collection of the learner to scope to
            limit: Maximum number of cards (default 20)

        Returns:
            List of DueCard, empty when nothing is due
        """
        validate_identifier(user_id, 'user_id')
        validate_optional_identifier(collection_id, 'list_id')
        validate_positive_count(limit, 'limit')

        states = ReviewStore.query_due(user_id, today, collection_id=collection_id, limit=limit)
        return [DueCard.from_state(state) for state in states]

    @staticmethod
    def select_session_deck(
        user_id: int,
        today: date,
        session_key: Optional[str] = None,
        collection_id: Optional[int] = None,
        limit: int = DEFAULT_DUE_LIMIT,
    ) -> List[DueCard]:
        """
        Snapshot of one study session's deck.

        Cards already answered under ``session_key`` keep their place at the
        front (in the order they were first answered) even though answering
        moved them out of the due set, and even if they have since left the
        list; the currently due cards not yet answered follow.  Without a key
        this is exactly :meth:`select_due`.
        """
        if not session_key:
            return DueSelector.select_due(user_id, today, collection_id=collection_id, limit=limit)

        validate_identifier(user_id, 'user_id')
        validate_optional_identifier(collection_id, 'list_id')
        validate_positive_count(limit, 'limit')

        answered = ReviewStore.query_session_answered(user_id, session_key)
        deck = answered[:limit]
        remaining = limit - len(deck)
        if remaining > 0:
            deck += ReviewStore.query_due(
                user_id,
                today,
                collection_id=collection_id,
                limit=remaining,
                exclude_ids=[state.review_state_id for state in answered],
            )
        return [DueCard.from_state(state) for state in deck]

    @staticmethod
    def count_due(user_id: int, today: date) -> int:
        validate_identifier(user_id, 'user_id')
        return ReviewStore.count_due(user_id, today)
