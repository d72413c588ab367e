"""
Recurrence rule models.

A RecurrenceRule is the validated, immutable result of the custom recurrence
form. The end condition is a tagged union so that a rule can never carry both
an end date and an occurrence count.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lifecore.models.enums import EndConditionType, RecurrenceUnit
from lifecore.utils.datetime_utils import format_display_date

DEFAULT_FREQUENCY = 1
DEFAULT_OCCURRENCES = 5


class NeverEnd(BaseModel):
    """Schedule repeats indefinitely."""

    model_config = ConfigDict(frozen=True)

    type: Literal["never"] = "never"


class OnDateEnd(BaseModel):
    """Schedule stops after end_date (inclusive)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["on_date"] = "on_date"
    end_date: date


class AfterOccurrencesEnd(BaseModel):
    """Schedule stops once count occurrences have been produced."""

    model_config = ConfigDict(frozen=True)

    type: Literal["after_occurrences"] = "after_occurrences"
    count: int = Field(..., ge=1)


EndCondition = Annotated[
    Union[NeverEnd, OnDateEnd, AfterOccurrencesEnd],
    Field(discriminator="type"),
]


class RecurrenceRule(BaseModel):
    """Validated custom recurrence rule."""

    model_config = ConfigDict(frozen=True)

    frequency: int = Field(DEFAULT_FREQUENCY, ge=1, description="Repeat every N units")
    unit: RecurrenceUnit = RecurrenceUnit.DAYS
    start_date: date
    end: EndCondition = Field(default_factory=NeverEnd)
    skip_weekends: bool = False

    @model_validator(mode="after")
    def validate_end_date(self):
        if isinstance(self.end, OnDateEnd) and self.end.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def end_condition(self) -> EndConditionType:
        return EndConditionType(self.end.type)

    @property
    def end_date(self) -> Optional[date]:
        """End date, present only for ON_DATE rules."""
        return self.end.end_date if isinstance(self.end, OnDateEnd) else None

    @property
    def occurrence_count(self) -> Optional[int]:
        """Occurrence limit, present only for AFTER_OCCURRENCES rules."""
        return self.end.count if isinstance(self.end, AfterOccurrencesEnd) else None

    def describe(self) -> str:
        """Human-readable summary, e.g. "Every 2 weeks, weekdays only, 5 times"."""
        if self.frequency == 1:
            text = f"Every {self.unit.singular}"
        else:
            text = f"Every {self.frequency} {self.unit.value}"
        if self.skip_weekends:
            text += ", weekdays only"
        if self.end_date is not None:
            text += f", until {format_display_date(self.end_date)}"
        elif self.occurrence_count is not None:
            plural = "time" if self.occurrence_count == 1 else "times"
            text += f", {self.occurrence_count} {plural}"
        return text

    def to_form_result(self) -> dict[str, Any]:
        """Key/value result in the shape the recurrence sheet hands back to its caller."""
        return {
            "frequency": self.frequency,
            "unit": self.unit.value,
            "startDate": self.start_date,
            "endCondition": self.end_condition.form_label,
            "endDate": self.end_date,
            "occurrences": self.occurrence_count,
            "skipWeekends": self.skip_weekends,
        }

    def __str__(self) -> str:
        return self.describe()


class RecurrenceRuleInput(BaseModel):
    """Raw, possibly invalid values entered in the recurrence form."""

    frequency_text: str = str(DEFAULT_FREQUENCY)
    unit: str = RecurrenceUnit.DAYS.value
    start_date: date
    end_condition: str = EndConditionType.NEVER.form_label
    end_date: Optional[date] = None
    occurrences_text: str = str(DEFAULT_OCCURRENCES)
    skip_weekends: bool = False

    @classmethod
    def from_form_result(cls, result: Mapping[str, Any]) -> "RecurrenceRuleInput":
        """Rebuild form input from a previous form result (see RecurrenceRule.to_form_result)."""
        frequency = result.get("frequency")
        occurrences = result.get("occurrences")
        return cls(
            frequency_text=str(frequency if frequency is not None else DEFAULT_FREQUENCY),
            unit=result.get("unit") or RecurrenceUnit.DAYS.value,
            start_date=_as_date(result["startDate"]),
            end_condition=result.get("endCondition") or EndConditionType.NEVER.form_label,
            end_date=_as_date(result.get("endDate")),
            occurrences_text=str(occurrences if occurrences is not None else DEFAULT_OCCURRENCES),
            skip_weekends=bool(result.get("skipWeekends", False)),
        )


def _as_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class RecurrencePreviewRequest(BaseModel):
    """Ask for the next occurrences of a rule."""

    rule: RecurrenceRule
    after: Optional[date] = Field(
        None, description="Occurrences strictly after this date; omit to start at the rule's start date"
    )
    count: int = Field(10, ge=1, le=100)


class RecurrencePreviewResponse(BaseModel):
    """Upcoming occurrences of a rule."""

    description: str
    occurrences: list[date]
