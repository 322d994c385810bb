"""
Stats module - Process-wide usage statistics.
"""
from dalil.stats.tracker import Exchange, StatsTracker, MAX_HISTORY, RECENT_LIMIT

__all__ = [
    "Exchange",
    "StatsTracker",
    "MAX_HISTORY",
    "RECENT_LIMIT",
]
