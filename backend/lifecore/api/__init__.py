"""API routers."""

from lifecore.api import daily_points, recurrence_rules

__all__ = [
    "daily_points",
    "recurrence_rules",
]
