from .learner_service import LearnerService

__all__ = ['LearnerService']
