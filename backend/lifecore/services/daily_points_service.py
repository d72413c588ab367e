"""
Daily points aggregation.

Computes points earned per day for the trailing week ending at a given
reference time, plus the bar scaling a chart uses to draw them.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from lifecore.core.config import get_settings
from lifecore.core.logger import setup_logger
from lifecore.models.daily_points import SERIES_LENGTH, DailyPoints, DailyPointsSeries
from lifecore.models.task import Task
from lifecore.utils.datetime_utils import (
    align_to_reference,
    weekday_label,
    whole_days_between,
)

logger = setup_logger(__name__)


class DailyPointsAggregator:
    """Reduce tasks into a seven-bucket points series."""

    def aggregate(self, tasks: Iterable[Task], now: datetime) -> DailyPointsSeries:
        """Sum points of completed tasks per calendar day for the last 7 days.

        A task counts when it is completed, its completion lies 0 to 6 whole
        days (truncated) before ``now``, and its completion date is one of the
        seven reference dates. Negative points count as 0.
        """
        days = self._reference_days(now)
        totals: dict[date, int] = {day: 0 for day in days}

        skipped = 0
        for task in tasks:
            if not task.is_completed:
                continue
            completed_at = align_to_reference(task.completed_at, now)  # type: ignore[arg-type]
            days_diff = whole_days_between(now, completed_at)
            if not 0 <= days_diff < SERIES_LENGTH:
                continue
            bucket = completed_at.date()
            if bucket not in totals:
                # In range by elapsed time, but on a calendar day outside the window
                skipped += 1
                continue
            totals[bucket] += max(task.points_earned, 0)

        if skipped:
            logger.debug("Skipped %d completions outside the reference dates", skipped)

        return DailyPointsSeries(
            days=tuple(
                DailyPoints(day=day, day_label=weekday_label(day), points=totals[day])
                for day in days
            )
        )

    @staticmethod
    def _reference_days(now: datetime) -> list[date]:
        today = now.date()
        return [today - timedelta(days=offset) for offset in range(SERIES_LENGTH - 1, -1, -1)]


def aggregate_daily_points(tasks: Iterable[Task], now: datetime) -> DailyPointsSeries:
    """Aggregate with the default aggregator."""
    return DailyPointsAggregator().aggregate(tasks, now)


def bar_height_fractions(
    series: DailyPointsSeries,
    min_fraction: Optional[float] = None,
    fallback_max: Optional[int] = None,
) -> list[float]:
    """Bar heights as fractions of the chart height.

    Each bar is ``points / max_points`` (``fallback_max`` when every day is 0),
    clamped to [min_fraction, 1.0] so empty days still show a stub.
    """
    settings = get_settings()
    if min_fraction is None:
        min_fraction = settings.CHART_MIN_BAR_FRACTION
    if fallback_max is None:
        fallback_max = settings.CHART_FALLBACK_MAX_POINTS

    scale = series.max_points or fallback_max
    return [min(max(points / scale, min_fraction), 1.0) for points in series.points]
