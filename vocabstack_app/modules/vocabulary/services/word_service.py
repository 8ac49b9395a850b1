# File: vocabstack_app/modules/vocabulary/services/word_service.py
"""
Word Service
============
Read access to vocabulary items and the one-off seed import.
"""

import json
import logging
from datetime import date
from typing import Iterable, List, Mapping, Optional

from vocabstack_app.core.db_session import safe_commit
from vocabstack_app.models import Word, db
from ..logics.levels import daily_index

logger = logging.getLogger(__name__)


class WordService:
    """Service for vocabulary items."""

    @staticmethod
    def get_word(word_id: int) -> Optional[Word]:
        return db.session.get(Word, word_id)

    @staticmethod
    def count_words() -> int:
        return Word.query.count()

    @staticmethod
    def word_for_day(day: date) -> Optional[Word]:
        """The word of the day: index ``day_of_year % total`` in id order."""
        index = daily_index(day, WordService.count_words())
        if index is None:
            return None
        return Word.query.order_by(Word.word_id.asc()).offset(index).first()

    @staticmethod
    def seed_words_if_empty(entries: Iterable[Mapping]) -> int:
        """
        Insert ``entries`` when the words table is empty.

        Entries repeating an already inserted word are skipped.

        Returns:
            Number of words inserted (0 when the table already had rows)
        """
        if WordService.count_words() > 0:
            return 0

        seen = set()
        inserted = 0
        try:
            for entry in entries:
                text = (entry.get('word') or '').strip()
                definition = (entry.get('definition') or '').strip()
                if not text or not definition or text in seen:
                    continue
                seen.add(text)
                db.session.add(Word(
                    word=text,
                    definition=definition,
                    part_of_speech=entry.get('part_of_speech'),
                    example=entry.get('example'),
                    level=entry.get('level'),
                ))
                inserted += 1
            safe_commit(db.session)
        except Exception:
            db.session.rollback()
            logger.error("[seed] Word import failed", exc_info=True)
            raise

        logger.info("[seed] Inserted %d words into the database.", inserted)
        return inserted

    @staticmethod
    def load_seed_file(path: str) -> List[dict]:
        """Read a JSON seed file holding a list of word entries."""
        with open(path, encoding='utf-8') as handle:
            data = json.load(handle)
        if not isinstance(data, list):
            raise ValueError(f'Seed file {path} must contain a JSON list')
        return data
