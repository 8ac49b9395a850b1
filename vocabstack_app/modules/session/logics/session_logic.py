"""
Session Logic - the study session as a pure state machine.

InProgress(position, reviewed, correct) -> InProgress(position + 1, ...) -> ... -> Completed

The cursor is a value handed to the client and back; nothing about a running
session is held in process memory.  This module has no database and no Flask
dependencies.
"""
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

PASSING_QUALITY = 3

# Query-string names of the cursor fields
ARG_POSITION = 'card'
ARG_REVIEWED = 'reviewed'
ARG_CORRECT = 'correct'
ARG_COLLECTION = 'listId'
ARG_SESSION_KEY = 'key'


def _parse_int(value: Any, name: str, default: Optional[int] = None) -> Optional[int]:
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        raise ValueError(f'{name} must be an integer')
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        raise ValueError(f'{name} must be an integer') from None


@dataclass(frozen=True)
class SessionCursor:
    """Position and running totals of one study session."""

    position: int = 0
    reviewed_count: int = 0
    correct_count: int = 0
    collection_id: Optional[int] = None
    session_key: Optional[str] = None

    def to_query_args(self) -> dict:
        args = {
            ARG_POSITION: self.position,
            ARG_REVIEWED: self.reviewed_count,
            ARG_CORRECT: self.correct_count,
        }
        if self.collection_id is not None:
            args[ARG_COLLECTION] = self.collection_id
        if self.session_key:
            args[ARG_SESSION_KEY] = self.session_key
        return args

    @classmethod
    def from_query_args(cls, args: Mapping) -> 'SessionCursor':
        """Rebuild a cursor from query-string or JSON values; raises ValueError on junk."""
        key = args.get(ARG_SESSION_KEY)
        if key is not None and not isinstance(key, str):
            raise ValueError(f'{ARG_SESSION_KEY} must be a string')
        return cls(
            position=_parse_int(args.get(ARG_POSITION), ARG_POSITION, 0),
            reviewed_count=_parse_int(args.get(ARG_REVIEWED), ARG_REVIEWED, 0),
            correct_count=_parse_int(args.get(ARG_CORRECT), ARG_CORRECT, 0),
            collection_id=_parse_int(args.get(ARG_COLLECTION), ARG_COLLECTION),
            session_key=(key or '').strip() or None,
        )


@dataclass(frozen=True)
class InProgress:
    cursor: SessionCursor
    card: Any = None
    deck_size: int = 0

    def to_dict(self) -> dict:
        return {
            'done': False,
            'card': self.card.to_dict() if self.card is not None else None,
            'position': self.cursor.position,
            'total': self.deck_size,
            'reviewed': self.cursor.reviewed_count,
            'correct': self.cursor.correct_count,
            'cursor': self.cursor.to_query_args(),
        }


@dataclass(frozen=True)
class Completed:
    cursor: SessionCursor
    streak: Any = None
    already_finalized: bool = False

    def to_dict(self) -> dict:
        return {
            'done': True,
            'reviewed': self.cursor.reviewed_count,
            'correct': self.cursor.correct_count,
            'streak': self.streak.current_streak if self.streak is not None else None,
            'already_finalized': self.already_finalized,
        }


SessionState = Union[InProgress, Completed]


def begin(collection_id: Optional[int] = None, session_key: Optional[str] = None) -> SessionCursor:
    """Fresh cursor: InProgress(0, 0, 0)."""
    return SessionCursor(0, 0, 0, collection_id=collection_id, session_key=session_key)


def after_answer(cursor: SessionCursor, quality: int) -> SessionCursor:
    """Count the answer and move past the card it was given for."""
    return replace(
        cursor,
        position=cursor.position + 1,
        reviewed_count=cursor.reviewed_count + 1,
        correct_count=cursor.correct_count + (1 if quality >= PASSING_QUALITY else 0),
    )


def resolve(cursor: SessionCursor, deck_size: int) -> SessionState:
    """
    Decide the session phase against a fresh deck snapshot.

    >>> isinstance(resolve(SessionCursor(position=3), 3), Completed)
    True
    """
    if cursor.position >= deck_size:
        return Completed(cursor)
    return InProgress(cursor, deck_size=deck_size)
