"""
Daily points models.

A DailyPointsSeries always holds exactly seven days, oldest first.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lifecore.models.task import Task

SERIES_LENGTH = 7


class DailyPoints(BaseModel):
    """Points earned on one calendar day."""

    model_config = ConfigDict(frozen=True)

    day: date
    day_label: str = Field(..., description="Short weekday name, e.g. Mon")
    points: int = Field(0, ge=0)


class DailyPointsSeries(BaseModel):
    """Points per day for the trailing week ending today."""

    model_config = ConfigDict(frozen=True)

    days: tuple[DailyPoints, ...]

    @field_validator("days")
    @classmethod
    def validate_days(cls, value: tuple[DailyPoints, ...]) -> tuple[DailyPoints, ...]:
        if len(value) != SERIES_LENGTH:
            raise ValueError(f"series must hold exactly {SERIES_LENGTH} days")
        if any(later.day <= earlier.day for earlier, later in zip(value, value[1:])):
            raise ValueError("series days must be in chronological order")
        return value

    @property
    def labels(self) -> list[str]:
        return [entry.day_label for entry in self.days]

    @property
    def points(self) -> list[int]:
        return [entry.points for entry in self.days]

    @property
    def max_points(self) -> int:
        return max(self.points)

    @property
    def total_points(self) -> int:
        return sum(self.points)


class DailyPointsRequest(BaseModel):
    """Request body for the daily points endpoint."""

    tasks: list[Task] = Field(default_factory=list)
    now: Optional[datetime] = Field(
        None, description="Reference time; defaults to the server's current time"
    )


class DailyPointsResponse(BaseModel):
    """Series plus the bar height fractions a chart would draw."""

    series: DailyPointsSeries
    bar_fractions: list[float]
    max_points: int
    total_points: int
