"""
Event Handlers for Gamification Module.

Listens to signals from other modules; the streak record of a learner is
created as soon as the learner exists.
"""
from flask import current_app

from vocabstack_app.core.signals import user_registered


@user_registered.connect
def on_user_registered(sender, **kwargs):
    """
    Handle user_registered: create the empty streak record.

    Expected kwargs:
        - user: User
    """
    from vocabstack_app.core.db_session import safe_commit
    from vocabstack_app.core.extensions import db
    from .services.streak_service import StreakStore

    user = kwargs.get('user')
    if user is None or user.user_id is None:
        return

    StreakStore.get_streak_state(user.user_id)
    safe_commit(db.session)
    current_app.logger.debug(f"[Gamification] Streak record ready for user {user.user_id}")
