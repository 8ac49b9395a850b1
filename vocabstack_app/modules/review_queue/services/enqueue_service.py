# File: vocabstack_app/modules/review_queue/services/enqueue_service.py
"""
Queue Enqueuer
==============
Admits never-reviewed words into the learner's review pool.

Every admission mode is idempotent: a word that already has a review state
for the learner is skipped, never reset.  New review states start with
``next_review_date = today`` and mastery 0.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from vocabstack_app.core.db_session import safe_commit
from vocabstack_app.core.error_handlers import NotFoundError
from vocabstack_app.core.signals import items_enqueued
from vocabstack_app.models import db
from vocabstack_app.modules.collections.interface import CollectionInterface
from vocabstack_app.modules.vocabulary.interface import VocabularyInterface
from vocabstack_app.utils.validators import validate_identifier, validate_positive_count
from ..schemas import EnqueueResult
from .review_store import ReviewStore

logger = logging.getLogger(__name__)


class QueueEnqueuer:
    """Service for idempotent admission of words into the review pool."""

    MODE_ITEM = 'item'
    MODE_COUNT = 'count'
    MODE_LEVEL = 'level'
    MODE_COLLECTION = 'collection'

    @staticmethod
    def _admit(user_id: int, word_ids: Iterable[int], today: date, mode: str) -> EnqueueResult:
        added = 0
        try:
            for word_id in word_ids:
                if ReviewStore.upsert_review_state(user_id, word_id, today):
                    added += 1
            safe_commit(db.session)
        except Exception:
            db.session.rollback()
            logger.error("Enqueue (%s) failed for user %s", mode, user_id, exc_info=True)
            raise

        logger.info("Enqueued %d new word(s) for user %s (mode=%s)", added, user_id, mode)
        if added:
            items_enqueued.send(None, user_id=user_id, added=added, mode=mode)
        return EnqueueResult(added=added, mode=mode)

    @staticmethod
    def enqueue_item(user_id: int, word_id: int, today: date) -> EnqueueResult:
        """Admit one explicit word; no-op if the learner already has it."""
        validate_identifier(user_id, 'user_id')
        validate_identifier(word_id, 'word_id')
        if VocabularyInterface.get_word(word_id) is None:
            raise NotFoundError('Word not found', resource='word')
        return QueueEnqueuer._admit(user_id, [word_id], today, QueueEnqueuer.MODE_ITEM)

    @staticmethod
    def enqueue_new(
        user_id: int,
        count: int,
        today: date,
        level: Optional[str] = None,
    ) -> EnqueueResult:
        """Admit up to ``count`` unreviewed words, lowest id first, optionally of one level."""
        validate_identifier(user_id, 'user_id')
        validate_positive_count(count, 'count')
        level = (level or '').strip() or None

        word_ids = ReviewStore.query_unreviewed(user_id, level=level, limit=count)
        mode = QueueEnqueuer.MODE_LEVEL if level else QueueEnqueuer.MODE_COUNT
        return QueueEnqueuer._admit(user_id, word_ids, today, mode)

    @staticmethod
    def enqueue_collection(user_id: int, collection_id: int, today: date) -> EnqueueResult:
        """Admit every word of the learner's collection that is not in the pool yet."""
        validate_identifier(user_id, 'user_id')
        validate_identifier(collection_id, 'list_id')
        # Raises NotFoundError for missing and foreign collections alike.
        CollectionInterface.get_collection(user_id, collection_id)

        word_ids = ReviewStore.query_unreviewed(user_id, collection_id=collection_id)
        return QueueEnqueuer._admit(user_id, word_ids, today, QueueEnqueuer.MODE_COLLECTION)

    @staticmethod
    def count_unreviewed(user_id: int) -> int:
        validate_identifier(user_id, 'user_id')
        return ReviewStore.count_unreviewed(user_id)
