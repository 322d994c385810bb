"""
Stats Routes - Usage counters and recent exchanges.

  GET /api/stats
"""
from fastapi import APIRouter, Depends

from dalil.models.chat import StatsResponse
from dalil.stats.tracker import StatsTracker
from dalil.api.dependencies import get_stats_tracker

router = APIRouter(
    prefix="/api",
    tags=["Stats"],
)


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Usage statistics",
)
def get_stats(stats: StatsTracker = Depends(get_stats_tracker)) -> dict:
    """Return the counters and the last 10 exchanges, newest first."""
    return stats.snapshot()
