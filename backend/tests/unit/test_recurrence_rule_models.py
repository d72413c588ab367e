"""
Unit tests for recurrence rule models.

Tests validation, description and form-result conversion.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from lifecore.models.enums import EndConditionType, RecurrenceUnit
from lifecore.models.recurrence_rule import (
    AfterOccurrencesEnd,
    NeverEnd,
    OnDateEnd,
    RecurrenceRule,
    RecurrenceRuleInput,
)
from lifecore.services.recurrence_rule_builder import build_recurrence_rule


class TestRecurrenceRule:
    """Tests for RecurrenceRule validation."""

    def test_defaults(self):
        rule = RecurrenceRule(start_date=date(2025, 3, 10))
        assert rule.frequency == 1
        assert rule.unit == RecurrenceUnit.DAYS
        assert rule.end == NeverEnd()
        assert rule.end_condition == EndConditionType.NEVER
        assert rule.skip_weekends is False

    def test_rule_is_immutable(self):
        rule = RecurrenceRule(start_date=date(2025, 3, 10))
        with pytest.raises(ValidationError):
            rule.frequency = 2

    def test_zero_frequency_rejected(self):
        with pytest.raises(ValidationError):
            RecurrenceRule(start_date=date(2025, 3, 10), frequency=0)

    def test_end_date_before_start_rejected(self):
        with pytest.raises(ValidationError):
            RecurrenceRule(
                start_date=date(2025, 3, 10),
                end=OnDateEnd(end_date=date(2025, 3, 9)),
            )

    def test_zero_occurrences_rejected(self):
        with pytest.raises(ValidationError):
            AfterOccurrencesEnd(count=0)

    def test_end_parsed_from_tagged_dict(self):
        rule = RecurrenceRule.model_validate(
            {
                "start_date": "2025-03-10",
                "end": {"type": "after_occurrences", "count": 4},
            }
        )
        assert isinstance(rule.end, AfterOccurrencesEnd)
        assert rule.occurrence_count == 4
        assert rule.end_date is None

    def test_unknown_end_type_rejected(self):
        with pytest.raises(ValidationError):
            RecurrenceRule.model_validate(
                {"start_date": "2025-03-10", "end": {"type": "sometimes"}}
            )

    def test_json_round_trip(self):
        rule = RecurrenceRule(
            frequency=2,
            unit=RecurrenceUnit.WEEKS,
            start_date=date(2025, 3, 10),
            end=OnDateEnd(end_date=date(2025, 6, 30)),
            skip_weekends=True,
        )
        restored = RecurrenceRule.model_validate_json(rule.model_dump_json())
        assert restored == rule
        assert restored.end_date == date(2025, 6, 30)


class TestDescribe:
    """Tests for the human-readable summary."""

    def test_every_day(self):
        rule = RecurrenceRule(start_date=date(2025, 3, 10))
        assert rule.describe() == "Every day"
        assert str(rule) == "Every day"

    def test_every_three_weeks(self):
        rule = RecurrenceRule(
            start_date=date(2025, 3, 10), frequency=3, unit=RecurrenceUnit.WEEKS
        )
        assert rule.describe() == "Every 3 weeks"

    def test_weekdays_until_date(self):
        rule = RecurrenceRule(
            start_date=date(2025, 3, 10),
            unit=RecurrenceUnit.MONTHS,
            end=OnDateEnd(end_date=date(2025, 12, 31)),
            skip_weekends=True,
        )
        assert rule.describe() == "Every month, weekdays only, until Dec 31, 2025"

    def test_occurrence_count(self):
        rule = RecurrenceRule(
            start_date=date(2025, 3, 10),
            frequency=2,
            end=AfterOccurrencesEnd(count=5),
        )
        assert rule.describe() == "Every 2 days, 5 times"

    def test_single_occurrence(self):
        rule = RecurrenceRule(
            start_date=date(2025, 3, 10), end=AfterOccurrencesEnd(count=1)
        )
        assert rule.describe() == "Every day, 1 time"


class TestFormResult:
    """Tests for conversion to and from the form's key/value result."""

    def test_to_form_result(self):
        rule = RecurrenceRule(
            frequency=2,
            unit=RecurrenceUnit.WEEKS,
            start_date=date(2025, 3, 10),
            end=AfterOccurrencesEnd(count=4),
        )
        assert rule.to_form_result() == {
            "frequency": 2,
            "unit": "weeks",
            "startDate": date(2025, 3, 10),
            "endCondition": "After X occurrences",
            "endDate": None,
            "occurrences": 4,
            "skipWeekends": False,
        }

    def test_round_trip_through_builder(self):
        rule = RecurrenceRule(
            frequency=3,
            unit=RecurrenceUnit.MONTHS,
            start_date=date(2025, 3, 10),
            end=OnDateEnd(end_date=date(2026, 3, 10)),
            skip_weekends=True,
        )
        inputs = RecurrenceRuleInput.from_form_result(rule.to_form_result())
        assert build_recurrence_rule(inputs) == rule

    def test_missing_values_use_form_defaults(self):
        inputs = RecurrenceRuleInput.from_form_result(
            {"startDate": datetime(2025, 3, 10, 9, 30)}
        )
        assert inputs.start_date == date(2025, 3, 10)
        assert inputs.frequency_text == "1"
        assert inputs.unit == "days"
        assert inputs.end_condition == "Never"
        assert inputs.occurrences_text == "5"
        assert inputs.skip_weekends is False

    def test_iso_string_dates(self):
        inputs = RecurrenceRuleInput.from_form_result(
            {
                "startDate": "2025-03-10T00:00:00.000",
                "endCondition": "On specific date",
                "endDate": "2025-04-01",
            }
        )
        assert inputs.start_date == date(2025, 3, 10)
        assert inputs.end_date == date(2025, 4, 1)


class TestEndConditionType:
    """Tests for end condition parsing."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Never", EndConditionType.NEVER),
            ("never", EndConditionType.NEVER),
            ("On specific date", EndConditionType.ON_DATE),
            ("OnDate", EndConditionType.ON_DATE),
            ("After X occurrences", EndConditionType.AFTER_OCCURRENCES),
            ("after_occurrences", EndConditionType.AFTER_OCCURRENCES),
        ],
    )
    def test_parse(self, raw, expected):
        assert EndConditionType.parse(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "Sometimes", "on"])
    def test_parse_unknown(self, raw):
        assert EndConditionType.parse(raw) is None

    def test_form_labels(self):
        assert EndConditionType.NEVER.form_label == "Never"
        assert EndConditionType.ON_DATE.form_label == "On specific date"
        assert EndConditionType.AFTER_OCCURRENCES.form_label == "After X occurrences"
