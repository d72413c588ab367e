"""
Daily points API endpoints.
"""

from datetime import datetime

from fastapi import APIRouter

from lifecore.api.deps import PointsAggregator
from lifecore.models.daily_points import DailyPointsRequest, DailyPointsResponse
from lifecore.services.daily_points_service import bar_height_fractions

router = APIRouter()


@router.post("", response_model=DailyPointsResponse)
async def get_daily_points(
    payload: DailyPointsRequest,
    aggregator: PointsAggregator,
) -> DailyPointsResponse:
    """Points earned per day over the last 7 days, with chart bar heights."""
    now = payload.now or datetime.now().astimezone()
    series = aggregator.aggregate(payload.tasks, now)
    return DailyPointsResponse(
        series=series,
        bar_fractions=bar_height_fractions(series),
        max_points=series.max_points,
        total_points=series.total_points,
    )
