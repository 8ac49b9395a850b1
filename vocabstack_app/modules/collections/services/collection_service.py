# File: vocabstack_app/modules/collections/services/collection_service.py
"""
Collection Service
==================
CRUD for learner-owned word lists.  Every lookup is scoped to the owner;
a list that exists but belongs to another learner is reported exactly like
a list that does not exist.
"""

from typing import List, Optional

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from vocabstack_app.core.db_session import safe_commit
from vocabstack_app.core.error_handlers import ConflictError, NotFoundError, ValidationError
from vocabstack_app.models import Word, WordList, WordListEntry, db
from vocabstack_app.utils.validators import validate_identifier

LIST_NOT_FOUND = 'List not found'
DUPLICATE_NAME = 'You already have a list with that name'


def _clean_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError('Name is required', errors={'name': name})
    name = name.strip()
    max_length = current_app.config.get('COLLECTION_NAME_MAX_LENGTH', 64)
    if len(name) > max_length:
        raise ValidationError(f'Name must be {max_length} characters or fewer', errors={'name': name})
    return name


def _clean_description(description) -> Optional[str]:
    if description is None:
        return None
    if not isinstance(description, str):
        raise ValidationError('Description must be text', errors={'description': description})
    return description.strip() or None


class CollectionService:
    """Service for managing word lists."""

    @staticmethod
    def get_collection(user_id: int, collection_id: int) -> WordList:
        """Return the learner's list or raise ``NotFoundError``."""
        collection = WordList.query.filter_by(list_id=collection_id, user_id=user_id).first()
        if collection is None:
            raise NotFoundError(LIST_NOT_FOUND, resource='list')
        return collection

    @staticmethod
    def list_collections(user_id: int) -> List[dict]:
        """The learner's lists, newest first, with their word counts."""
        rows = (
            db.session.query(WordList, func.count(WordListEntry.word_id))
            .outerjoin(WordListEntry, WordListEntry.list_id == WordList.list_id)
            .filter(WordList.user_id == user_id)
            .group_by(WordList.list_id)
            .order_by(WordList.created_at.desc(), WordList.list_id.desc())
            .all()
        )
        result = []
        for collection, word_count in rows:
            data = collection.to_dict()
            data['word_count'] = word_count
            result.append(data)
        return result

    @staticmethod
    def create_collection(user_id: int, name, description=None) -> WordList:
        validate_identifier(user_id, 'user_id')
        name = _clean_name(name)
        description = _clean_description(description)

        if WordList.query.filter_by(user_id=user_id, name=name).first() is not None:
            raise ConflictError(DUPLICATE_NAME)

        collection = WordList(user_id=user_id, name=name, description=description)
        db.session.add(collection)
        try:
            safe_commit(db.session)
        except IntegrityError:
            # Lost the race against a concurrent create with the same name.
            db.session.rollback()
            raise ConflictError(DUPLICATE_NAME)
        current_app.logger.info(f"[Collections] User {user_id} created list '{name}'")
        return collection

    @staticmethod
    def update_collection(user_id: int, collection_id: int, name=None, description=None) -> WordList:
        collection = CollectionService.get_collection(user_id, collection_id)
        new_name = collection.name if name is None else _clean_name(name)

        if new_name != collection.name:
            clash = WordList.query.filter_by(user_id=user_id, name=new_name).first()
            if clash is not None:
                raise ConflictError(DUPLICATE_NAME)

        collection.name = new_name
        if description is not None:
            collection.description = _clean_description(description)
        try:
            safe_commit(db.session)
        except IntegrityError:
            db.session.rollback()
            raise ConflictError(DUPLICATE_NAME)
        return collection

    @staticmethod
    def delete_collection(user_id: int, collection_id: int) -> None:
        """Delete a list; the learner's review states are untouched."""
        collection = CollectionService.get_collection(user_id, collection_id)
        db.session.delete(collection)
        safe_commit(db.session)
        current_app.logger.info(f"[Collections] User {user_id} deleted list {collection_id}")

    @staticmethod
    def add_word_to_collection(user_id: int, collection_id: int, word_id) -> bool:
        """
        Add a word to the learner's list.

        Returns:
            True when the word was added, False when it was already a member.
        """
        validate_identifier(word_id, 'wordId')
        collection = CollectionService.get_collection(user_id, collection_id)
        if db.session.get(Word, word_id) is None:
            raise NotFoundError('Word not found', resource='word')

        existing = db.session.get(WordListEntry, (collection.list_id, word_id))
        if existing is not None:
            return False
        db.session.add(WordListEntry(list_id=collection.list_id, word_id=word_id))
        safe_commit(db.session)
        return True

    @staticmethod
    def remove_word_from_collection(user_id: int, collection_id: int, word_id) -> bool:
        validate_identifier(word_id, 'wordId')
        collection = CollectionService.get_collection(user_id, collection_id)
        entry = db.session.get(WordListEntry, (collection.list_id, word_id))
        if entry is None:
            return False
        db.session.delete(entry)
        safe_commit(db.session)
        return True

    @staticmethod
    def get_collection_words(user_id: int, collection_id: int) -> List[Word]:
        collection = CollectionService.get_collection(user_id, collection_id)
        return (
            Word.query.join(WordListEntry, WordListEntry.word_id == Word.word_id)
            .filter(WordListEntry.list_id == collection.list_id)
            .order_by(WordListEntry.added_at.asc(), Word.word_id.asc())
            .all()
        )
