"""
Enum definitions for the application.

These enums are used across models and provide type-safe status/unit values.
"""

from enum import Enum
from typing import Optional


class TaskStatus(str, Enum):
    """Task status."""

    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    POSTPONED = "postponed"
    NOT_DONE = "not_done"


class RecurrenceUnit(str, Enum):
    """Unit the recurrence interval is counted in."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"

    @property
    def singular(self) -> str:
        return self.value[:-1]


class EndConditionType(str, Enum):
    """
    When a recurring schedule stops producing occurrences.

    NEVER = Repeats indefinitely
    ON_DATE = Stops after a specific calendar date
    AFTER_OCCURRENCES = Stops after a fixed number of occurrences
    """

    NEVER = "never"
    ON_DATE = "on_date"
    AFTER_OCCURRENCES = "after_occurrences"

    @property
    def form_label(self) -> str:
        """Label used by the recurrence form's segmented control."""
        return _FORM_LABELS[self]

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["EndConditionType"]:
        """Resolve a stored value, CamelCase name or form label. None if unknown."""
        if raw is None:
            return None
        key = raw.strip().lower().replace(" ", "").replace("_", "")
        return _END_CONDITION_ALIASES.get(key)


_FORM_LABELS = {
    EndConditionType.NEVER: "Never",
    EndConditionType.ON_DATE: "On specific date",
    EndConditionType.AFTER_OCCURRENCES: "After X occurrences",
}

# Keys are lowercased with spaces and underscores removed
_END_CONDITION_ALIASES = {
    "never": EndConditionType.NEVER,
    "ondate": EndConditionType.ON_DATE,
    "onspecificdate": EndConditionType.ON_DATE,
    "afteroccurrences": EndConditionType.AFTER_OCCURRENCES,
    "afterxoccurrences": EndConditionType.AFTER_OCCURRENCES,
}
