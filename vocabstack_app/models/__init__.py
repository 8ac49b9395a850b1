"""Database models package for VocabStack."""

from ..core.extensions import db

from .user import User
from .vocabulary import Word, WordList, WordListEntry
from .progress import ReviewLog, ReviewState

__all__ = [
    'db',
    'User',
    'Word',
    'WordList',
    'WordListEntry',
    'ReviewState',
    'ReviewLog',
]
