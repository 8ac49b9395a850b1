"""
Collections Interface
=====================
Public API for the learner's word lists.  Used by the review queue to scope
admission and due selection to one list.
"""

from vocabstack_app.models import WordList
from .services.collection_service import CollectionService


class CollectionInterface:
    """Public interface for collection operations."""

    @staticmethod
    def get_collection(user_id: int, collection_id: int) -> WordList:
        """Raises ``NotFoundError`` for a missing list and for another learner's list alike."""
        return CollectionService.get_collection(user_id, collection_id)
