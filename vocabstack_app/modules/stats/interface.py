from datetime import date
from typing import Any, Dict

from .services.stats_aggregator import StatsAggregator


def get_dashboard_stats(user_id: int, today: date) -> Dict[str, Any]:
    """Due/unlearned counts, mastery breakdown, streak and the word of the day."""
    return StatsAggregator.get_user_dashboard_stats(user_id, today)


def get_mastery_breakdown(user_id: int) -> Dict[str, int]:
    return StatsAggregator.get_mastery_breakdown(user_id)
