"""
Task read model.

Only the fields the points aggregation reads are required; the rest of the
task lives with the caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from lifecore.models.enums import TaskStatus


class Task(BaseModel):
    """Task as seen by the daily points aggregation."""

    id: Optional[str] = None
    title: Optional[str] = Field(None, max_length=500)
    status: TaskStatus = TaskStatus.PENDING
    completed_at: Optional[datetime] = None
    points_earned: int = Field(0, description="Points earned (negative = points lost)")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED and self.completed_at is not None
