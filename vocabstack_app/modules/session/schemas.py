from .logics.session_logic import Completed, InProgress, SessionCursor, SessionState

__all__ = ['Completed', 'InProgress', 'SessionCursor', 'SessionState']
