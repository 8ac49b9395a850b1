from .streak_service import StreakService, StreakStore

__all__ = ['StreakService', 'StreakStore']
