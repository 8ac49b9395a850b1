from .walker import SessionWalker

__all__ = ['SessionWalker']
