"""
Date and datetime helpers shared by the rule and points services.

Labels are fixed English abbreviations so output does not depend on the
process locale.
"""

import calendar
from datetime import date, datetime, timedelta, timezone

UTC = timezone.utc

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

ONE_DAY = timedelta(days=1)


def weekday_label(value: date) -> str:
    """Short weekday name, e.g. "Mon"."""
    return WEEKDAY_LABELS[value.weekday()]


def format_display_date(value: date) -> str:
    """Format a date the way the form shows it, e.g. "Mar 7, 2025"."""
    return f"{MONTH_LABELS[value.month - 1]} {value.day}, {value.year}"


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


def whole_days_between(later: datetime, earlier: datetime) -> int:
    """
    Number of whole days from ``earlier`` to ``later``, truncated toward zero.

    Unlike ``timedelta.days`` (which floors), -0.5 days yields 0, not -1.

    Example:
        >>> whole_days_between(datetime(2025, 3, 10, 8), datetime(2025, 3, 10, 20))
        0
    """
    return int((later - earlier) / ONE_DAY)


def align_to_reference(value: datetime, reference: datetime) -> datetime:
    """
    Make ``value`` comparable with ``reference``.

    Handles:
    - both naive or both aware: aware values are converted into reference's zone
    - naive value, aware reference: value is assumed to be in reference's zone
    - aware value, naive reference: value is normalized to naive UTC
    """
    if reference.tzinfo is not None:
        if value.tzinfo is None:
            return value.replace(tzinfo=reference.tzinfo)
        return value.astimezone(reference.tzinfo)
    return normalize_naive_utc(value)


def normalize_naive_utc(value: datetime) -> datetime:
    """Normalize datetime to naive UTC for comparisons."""
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


def shift_days(value: date, days: int) -> date:
    """Add ``days`` to ``value``, saturating at ``date.min``/``date.max``."""
    try:
        return value + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min


def add_months(value: date, months: int) -> date:
    """Shift ``value`` by whole months, clamping the day to the target month's length."""
    month_index = value.year * 12 + value.month - 1 + months
    year, month = divmod(month_index, 12)
    month += 1
    max_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, max_day))
