"""
Recurrence schedule.

Expands a RecurrenceRule into concrete occurrence dates.

Occurrences are addressed by candidate index (start, start + step, ...), so
lookups far from the start date jump straight to the right index instead of
walking every date in between.
"""

from __future__ import annotations

from datetime import date, timedelta
from functools import cached_property
from typing import Iterator, Optional

from lifecore.core.config import get_settings
from lifecore.core.logger import setup_logger
from lifecore.models.enums import RecurrenceUnit
from lifecore.models.recurrence_rule import RecurrenceRule
from lifecore.utils.datetime_utils import ONE_DAY, add_months, is_weekend, shift_days

logger = setup_logger(__name__)

# Candidate weekdays repeat every 7 candidates for day- and week-based rules
WEEKDAY_CYCLE = 7


class RecurrenceSchedule:
    """Occurrence calculations for a single rule.

    Weekend dates are dropped (not shifted) when the rule skips weekends, and
    dropped dates do not count towards an occurrence limit. Candidates past
    ``date.max`` end the schedule.
    """

    def __init__(self, rule: RecurrenceRule, scan_limit_days: Optional[int] = None):
        self.rule = rule
        self.scan_limit_days = (
            scan_limit_days
            if scan_limit_days is not None
            else get_settings().RECURRENCE_SCAN_LIMIT_DAYS
        )

    def is_due_on(self, day: date) -> bool:
        """Check whether the rule produces an occurrence on the given date."""
        rule = self.rule
        if day < rule.start_date or self.has_ended(day):
            return False
        if not self._matches_interval(day):
            return False
        if rule.skip_weekends and is_weekend(day):
            return False
        return True

    def has_ended(self, day: date) -> bool:
        """Check whether the schedule is over on the given date."""
        end_date = self.rule.end_date
        if end_date is not None:
            return day > end_date
        if self.rule.occurrence_count is not None:
            last = self.last_occurrence
            return last is None or day > last
        return False

    @cached_property
    def last_occurrence(self) -> Optional[date]:
        """Final occurrence for bounded rules, None for open-ended ones."""
        rule = self.rule
        if rule.end_date is None and rule.occurrence_count is None:
            return None
        if self._never_on_weekday:
            return None
        if rule.end_date is not None:
            return self._last_on_or_before(rule.end_date)
        return self._nth_occurrence(rule.occurrence_count)  # type: ignore[arg-type]

    def next_occurrence(self, after: date) -> Optional[date]:
        """First occurrence strictly after the given date.

        Returns None when the schedule has ended or nothing is due within
        the scan limit.
        """
        try:
            first = after + ONE_DAY
        except OverflowError:
            return None
        return self._first_within_scan(first)

    def next_occurrences(self, after: Optional[date], count: int) -> list[date]:
        """Up to ``count`` consecutive occurrences after the given date.

        With ``after=None`` the list starts at the rule's start date.
        """
        results: list[date] = []
        if after is None:
            current = self._first_within_scan(self.rule.start_date)
        else:
            current = self.next_occurrence(after)
        while current is not None and len(results) < count:
            results.append(current)
            current = self.next_occurrence(current)
        return results

    def occurrences_between(self, start: date, end: date) -> list[date]:
        """All occurrences within [start, end]."""
        results: list[date] = []
        for occurrence in self.occurrences(start):
            if occurrence > end:
                break
            results.append(occurrence)
        return results

    def count_between(self, start: date, end: date) -> int:
        return len(self.occurrences_between(start, end))

    def occurrences(self, start: Optional[date] = None) -> Iterator[date]:
        """Iterate occurrences in order, from ``start`` (default: the rule's start).

        Open-ended rules yield until ``date.max``; callers should bound the
        iteration.
        """
        rule = self.rule
        if self._never_on_weekday:
            return
        bound = rule.end_date
        if rule.occurrence_count is not None:
            bound = self.last_occurrence
            if bound is None:
                return

        index = self._first_index_on_or_after(start) if start is not None else 0
        while True:
            candidate = self._candidate_at(index)
            if candidate is None or (bound is not None and candidate > bound):
                return
            index += 1
            if rule.skip_weekends and is_weekend(candidate):
                continue
            yield candidate

    def _first_within_scan(self, first: date) -> Optional[date]:
        limit = shift_days(first, self.scan_limit_days - 1)
        for occurrence in self.occurrences(first):
            if occurrence > limit:
                break
            return occurrence
        logger.debug("No occurrence within %d days from %s", self.scan_limit_days, first)
        return None

    def _candidate_at(self, index: int) -> Optional[date]:
        """Candidate date at ``index``, or None once it would pass ``date.max``."""
        rule = self.rule
        try:
            if rule.unit == RecurrenceUnit.MONTHS:
                return add_months(rule.start_date, index * rule.frequency)
            return rule.start_date + timedelta(days=index * self._step_days)
        except (OverflowError, ValueError):
            return None

    def _first_index_on_or_after(self, day: date) -> int:
        rule = self.rule
        if day <= rule.start_date:
            return 0
        if rule.unit == RecurrenceUnit.MONTHS:
            index = -(-self._months_since_start(day) // rule.frequency)
            candidate = self._candidate_at(index)
            if candidate is not None and candidate < day:
                index += 1
            return index
        return -(-(day - rule.start_date).days // self._step_days)

    def _last_index_on_or_before(self, day: date) -> int:
        rule = self.rule
        if day < rule.start_date:
            return -1
        if rule.unit == RecurrenceUnit.MONTHS:
            index = self._months_since_start(day) // rule.frequency
            candidate = self._candidate_at(index)
            if candidate is None or candidate > day:
                index -= 1
            return index
        return (day - rule.start_date).days // self._step_days

    def _last_on_or_before(self, day: date) -> Optional[date]:
        index = self._last_index_on_or_before(day)
        while index >= 0:
            candidate = self._candidate_at(index)
            if candidate is not None and not (
                self.rule.skip_weekends and is_weekend(candidate)
            ):
                return candidate
            index -= 1
        return None

    def _nth_occurrence(self, n: int) -> Optional[date]:
        """The n-th produced date (1-based), clamped to the last representable one."""
        rule = self.rule
        if not rule.skip_weekends:
            index = n - 1
        elif rule.unit == RecurrenceUnit.MONTHS:
            found = 0
            index = -1
            while found < n:
                index += 1
                candidate = self._candidate_at(index)
                if candidate is None:
                    return self._last_on_or_before(date.max)
                if not is_weekend(candidate):
                    found += 1
        else:
            offsets = self._weekday_offsets
            cycles, remainder = divmod(n - 1, len(offsets))
            index = cycles * WEEKDAY_CYCLE + offsets[remainder]

        candidate = self._candidate_at(index)
        if candidate is None:
            return self._last_on_or_before(date.max)
        return candidate

    def _matches_interval(self, day: date) -> bool:
        rule = self.rule
        if rule.unit == RecurrenceUnit.MONTHS:
            months_diff = self._months_since_start(day)
            if months_diff % rule.frequency != 0:
                return False
            return day == add_months(rule.start_date, months_diff)
        return (day - rule.start_date).days % self._step_days == 0

    def _months_since_start(self, day: date) -> int:
        start = self.rule.start_date
        return (day.year - start.year) * 12 + (day.month - start.month)

    @property
    def _step_days(self) -> int:
        if self.rule.unit == RecurrenceUnit.WEEKS:
            return 7 * self.rule.frequency
        return self.rule.frequency

    @cached_property
    def _weekday_offsets(self) -> list[int]:
        """Indices within one 7-candidate cycle that fall on a weekday."""
        start_weekday = self.rule.start_date.weekday()
        return [
            offset
            for offset in range(WEEKDAY_CYCLE)
            if (start_weekday + offset * self._step_days) % 7 < 5
        ]

    @property
    def _never_on_weekday(self) -> bool:
        """True when every candidate is a weekend day that gets skipped."""
        rule = self.rule
        if not rule.skip_weekends or rule.unit == RecurrenceUnit.MONTHS:
            return False
        return not self._weekday_offsets
