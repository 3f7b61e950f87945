from __future__ import annotations

from enum import Enum


class GuardStatus(str, Enum):
    """Employment status of a guard."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ShiftMark(str, Enum):
    """Tri-state attendance mark for one shift slot."""

    UNMARKED = "Unmarked"
    PRESENT = "Present"
    ABSENT = "Absent"


class Shift(str, Enum):
    """The three fixed daily work periods."""

    MORNING = "morning"
    EVENING = "evening"
    NIGHT = "night"


class ExpenseType(str, Enum):
    ADVANCE = "Advance"
    FINE = "Fine"
    OTHER = "Other"


class AdvanceScope(str, Enum):
    """Which expense types count toward a salary slip's total advance."""

    ALL = "all"
    ADVANCE_ONLY = "advance_only"
