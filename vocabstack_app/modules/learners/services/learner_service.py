"""
Learner Service
===============
Creates learner rows and announces them so dependent records (the streak
record) exist from the start.
"""

from typing import Optional

from flask import current_app

from vocabstack_app.core.db_session import safe_commit
from vocabstack_app.core.error_handlers import ConflictError, ValidationError
from vocabstack_app.core.signals import user_registered
from vocabstack_app.models import User, db


class LearnerService:

    @staticmethod
    def create_learner(username: str, email: str, password: str) -> User:
        username = (username or '').strip()
        email = (email or '').strip().lower()
        if not username or not email or not password:
            raise ValidationError('Username, email and password are required')

        if User.query.filter((User.username == username) | (User.email == email)).first():
            raise ConflictError('Username or email already registered')

        user = User(username=username, email=email)
        user.set_password(password)
        db.session.add(user)
        safe_commit(db.session)

        current_app.logger.info(f"[Learners] Created learner {user.user_id} ({username})")
        user_registered.send(None, user=user)
        return user

    @staticmethod
    def get_learner(user_id: int) -> Optional[User]:
        return db.session.get(User, user_id)
