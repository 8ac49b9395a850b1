from typing import Optional

from vocabstack_app.models import User
from .services.learner_service import LearnerService


def create_learner(username: str, email: str, password: str) -> User:
    """Create a learner and its streak record."""
    return LearnerService.create_learner(username, email, password)


def get_learner(user_id: int) -> Optional[User]:
    return LearnerService.get_learner(user_id)
