from .word_service import WordService

__all__ = ['WordService']
