"""
Recurrence rule API endpoints.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from lifecore.api.deps import RuleBuilder
from lifecore.core.exceptions import InvalidRuleError
from lifecore.models.recurrence_rule import (
    RecurrencePreviewRequest,
    RecurrencePreviewResponse,
    RecurrenceRule,
    RecurrenceRuleInput,
)
from lifecore.services.recurrence_schedule import RecurrenceSchedule

router = APIRouter()


@router.post("", response_model=RecurrenceRule)
async def build_recurrence_rule(
    payload: RecurrenceRuleInput,
    builder: RuleBuilder,
    today: Optional[date] = Query(
        None, description="Client's current date; enables the selectable-range checks"
    ),
) -> RecurrenceRule:
    """Validate recurrence form input and return the assembled rule."""
    try:
        return builder.build(payload, today=today)
    except InvalidRuleError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": exc.message, "details": exc.details},
        ) from exc


@router.post("/preview", response_model=RecurrencePreviewResponse)
async def preview_occurrences(payload: RecurrencePreviewRequest) -> RecurrencePreviewResponse:
    """List the next occurrences of a rule."""
    rule = payload.rule
    schedule = RecurrenceSchedule(rule)
    return RecurrencePreviewResponse(
        description=rule.describe(),
        occurrences=schedule.next_occurrences(payload.after, payload.count),
    )
