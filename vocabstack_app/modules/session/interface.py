"""
Session Interface
=================
Public API of the study session walker.
"""

from datetime import date
from typing import Mapping, Optional

from .schemas import SessionCursor, SessionState
from .services.walker import SessionWalker


class SessionInterface:

    @staticmethod
    def begin_session(user_id: int, today: date, collection_id: Optional[int] = None) -> SessionState:
        return SessionWalker.begin_session(user_id, today, collection_id)

    @staticmethod
    def answer(user_id: int, cursor: SessionCursor, review_state_id: int, quality: int, today: date) -> SessionCursor:
        return SessionWalker.answer(user_id, cursor, review_state_id, quality, today)

    @staticmethod
    def advance(user_id: int, cursor: SessionCursor, today: date) -> SessionState:
        return SessionWalker.advance(user_id, cursor, today)

    @staticmethod
    def parse_cursor(args: Mapping) -> SessionCursor:
        return SessionWalker.parse_cursor(args)
