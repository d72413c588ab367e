"""Pydantic models (schemas) for the application."""

from lifecore.models.daily_points import (
    DailyPoints,
    DailyPointsRequest,
    DailyPointsResponse,
    DailyPointsSeries,
)
from lifecore.models.enums import EndConditionType, RecurrenceUnit, TaskStatus
from lifecore.models.recurrence_rule import (
    AfterOccurrencesEnd,
    EndCondition,
    NeverEnd,
    OnDateEnd,
    RecurrencePreviewRequest,
    RecurrencePreviewResponse,
    RecurrenceRule,
    RecurrenceRuleInput,
)
from lifecore.models.task import Task

__all__ = [
    # Enums
    "TaskStatus",
    "RecurrenceUnit",
    "EndConditionType",
    # Recurrence
    "RecurrenceRule",
    "RecurrenceRuleInput",
    "RecurrencePreviewRequest",
    "RecurrencePreviewResponse",
    "EndCondition",
    "NeverEnd",
    "OnDateEnd",
    "AfterOccurrencesEnd",
    # Points
    "Task",
    "DailyPoints",
    "DailyPointsSeries",
    "DailyPointsRequest",
    "DailyPointsResponse",
]
