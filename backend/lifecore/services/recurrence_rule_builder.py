"""
Recurrence rule builder.

Turns raw recurrence form values into a validated RecurrenceRule.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from lifecore.core.config import get_settings
from lifecore.core.exceptions import InvalidRuleError
from lifecore.core.logger import setup_logger
from lifecore.models.enums import EndConditionType, RecurrenceUnit
from lifecore.models.recurrence_rule import (
    DEFAULT_FREQUENCY,
    DEFAULT_OCCURRENCES,
    AfterOccurrencesEnd,
    EndCondition,
    NeverEnd,
    OnDateEnd,
    RecurrenceRule,
    RecurrenceRuleInput,
)
from lifecore.utils.datetime_utils import format_display_date

logger = setup_logger(__name__)


class RecurrenceRuleBuilder:
    """Validate recurrence form input and assemble an immutable rule."""

    def __init__(self, horizon_days: Optional[int] = None):
        self.horizon_days = (
            horizon_days
            if horizon_days is not None
            else get_settings().DATE_SELECTION_HORIZON_DAYS
        )

    def build(
        self, inputs: RecurrenceRuleInput, today: Optional[date] = None
    ) -> RecurrenceRule:
        """Build a rule from form input.

        Numeric fields fall back to their defaults when they don't parse.
        When ``today`` is given, the date-picker bounds are re-checked:
        start within [today, today + horizon], end within [start, today + horizon].

        Raises:
            InvalidRuleError: unknown end condition, missing end date, end date
                before start date, or a date outside the selectable range.
        """
        end_type = EndConditionType.parse(inputs.end_condition)
        if end_type is None:
            raise self._reject(
                f"Unknown end condition: {inputs.end_condition!r}",
                field="end_condition",
                value=inputs.end_condition,
            )

        frequency = self._parse_positive_int(inputs.frequency_text, DEFAULT_FREQUENCY)
        unit = self._parse_unit(inputs.unit)
        end = self._build_end(end_type, inputs)

        if today is not None:
            self._check_selectable_range(inputs.start_date, end, today)

        try:
            rule = RecurrenceRule(
                frequency=frequency,
                unit=unit,
                start_date=inputs.start_date,
                end=end,
                skip_weekends=inputs.skip_weekends,
            )
        except PydanticValidationError as exc:
            raise self._reject(
                str(exc), errors=exc.errors(include_url=False, include_context=False)
            ) from exc

        logger.debug("Built recurrence rule: %s", rule.describe())
        return rule

    def _build_end(
        self, end_type: EndConditionType, inputs: RecurrenceRuleInput
    ) -> EndCondition:
        if end_type == EndConditionType.ON_DATE:
            if inputs.end_date is None:
                raise self._reject("End date is required", field="end_date")
            if inputs.end_date < inputs.start_date:
                raise self._reject(
                    "End date must not be before start date",
                    field="end_date",
                    start_date=inputs.start_date.isoformat(),
                    end_date=inputs.end_date.isoformat(),
                )
            return OnDateEnd(end_date=inputs.end_date)

        if end_type == EndConditionType.AFTER_OCCURRENCES:
            count = self._parse_positive_int(inputs.occurrences_text, DEFAULT_OCCURRENCES)
            return AfterOccurrencesEnd(count=count)

        return NeverEnd()

    def _check_selectable_range(
        self, start_date: date, end: EndCondition, today: date
    ) -> None:
        last_selectable = today + timedelta(days=self.horizon_days)
        if not today <= start_date <= last_selectable:
            raise self._reject(
                "Start date must be between "
                f"{format_display_date(today)} and {format_display_date(last_selectable)}",
                field="start_date",
            )
        if isinstance(end, OnDateEnd) and end.end_date > last_selectable:
            raise self._reject(
                f"End date must be on or before {format_display_date(last_selectable)}",
                field="end_date",
            )

    @staticmethod
    def _parse_positive_int(text: Optional[str], default: int) -> int:
        try:
            value = int(text)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            logger.debug("Could not parse %r as an integer, using %d", text, default)
            return default
        if value < 1:
            logger.debug("Non-positive value %d replaced with %d", value, default)
            return default
        return value

    @staticmethod
    def _parse_unit(raw: Optional[str]) -> RecurrenceUnit:
        try:
            return RecurrenceUnit((raw or "").strip().lower())
        except ValueError:
            logger.warning("Unknown recurrence unit %r, falling back to days", raw)
            return RecurrenceUnit.DAYS

    @staticmethod
    def _reject(message: str, **details) -> InvalidRuleError:
        logger.info("Rejected recurrence rule: %s", message)
        return InvalidRuleError(message, details=details or None)


def build_recurrence_rule(
    inputs: RecurrenceRuleInput, today: Optional[date] = None
) -> RecurrenceRule:
    """Build a rule with the default builder settings."""
    return RecurrenceRuleBuilder().build(inputs, today=today)
