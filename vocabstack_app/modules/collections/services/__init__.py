from .collection_service import CollectionService

__all__ = ['CollectionService']
