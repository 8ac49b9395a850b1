from .due_selector import DEFAULT_DUE_LIMIT, DueSelector
from .enqueue_service import QueueEnqueuer
from .review_store import ReviewStore

__all__ = ['DEFAULT_DUE_LIMIT', 'DueSelector', 'QueueEnqueuer', 'ReviewStore']
