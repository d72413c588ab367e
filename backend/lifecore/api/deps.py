"""
Dependency injection for API endpoints.

Services are constructed from the cached settings so tests can override them
through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from lifecore.core.config import Settings, get_settings
from lifecore.services.daily_points_service import DailyPointsAggregator
from lifecore.services.recurrence_rule_builder import RecurrenceRuleBuilder


def get_rule_builder(
    settings: Annotated[Settings, Depends(get_settings)],
) -> RecurrenceRuleBuilder:
    """Get a rule builder using the configured date-selection horizon."""
    return RecurrenceRuleBuilder(horizon_days=settings.DATE_SELECTION_HORIZON_DAYS)


def get_points_aggregator() -> DailyPointsAggregator:
    """Get the daily points aggregator."""
    return DailyPointsAggregator()


RuleBuilder = Annotated[RecurrenceRuleBuilder, Depends(get_rule_builder)]
PointsAggregator = Annotated[DailyPointsAggregator, Depends(get_points_aggregator)]
