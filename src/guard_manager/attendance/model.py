from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..core.enums import Shift, ShiftMark


@dataclass(frozen=True)
class ShiftStatus:
    mark: ShiftMark = ShiftMark.UNMARKED
    food_taken: bool = False

    @property
    def is_present(self) -> bool:
        return self.mark == ShiftMark.PRESENT

    def normalized(self) -> "ShiftStatus":
        """Food only counts for a shift the guard actually worked."""
        if self.food_taken and not self.is_present:
            return ShiftStatus(mark=self.mark, food_taken=False)
        return self

    def to_dict(self) -> dict:
        return {"status": self.mark.value, "food_taken": self.food_taken}

    @classmethod
    def from_dict(cls, data: dict) -> "ShiftStatus":
        return cls(
            mark=ShiftMark(data.get("status") or ShiftMark.UNMARKED.value),
            food_taken=bool(data.get("food_taken", False)),
        ).normalized()


@dataclass(frozen=True)
class AttendanceRecord:
    """One guard's three shift marks for one day.

    (guard_id, date) is the natural key; ``site_id`` is a copy of the guard's
    site at the time of marking.
    """

    id: str
    guard_id: str
    site_id: str
    date: str
    morning: ShiftStatus = field(default_factory=ShiftStatus)
    evening: ShiftStatus = field(default_factory=ShiftStatus)
    night: ShiftStatus = field(default_factory=ShiftStatus)
    overtime_hrs: float = 0

    def __post_init__(self):
        object.__setattr__(self, "morning", self.morning.normalized())
        object.__setattr__(self, "evening", self.evening.normalized())
        object.__setattr__(self, "night", self.night.normalized())

    @property
    def natural_key(self) -> tuple[str, str]:
        return (self.guard_id, self.date)

    def shift(self, which: Shift) -> ShiftStatus:
        if which == Shift.MORNING:
            return self.morning
        if which == Shift.EVENING:
            return self.evening
        if which == Shift.NIGHT:
            return self.night
        raise ValueError(f"Unknown shift: {which!r}")

    def shifts(self) -> tuple[ShiftStatus, ShiftStatus, ShiftStatus]:
        return (self.morning, self.evening, self.night)

    def with_shift(self, which: Shift, status: ShiftStatus) -> "AttendanceRecord":
        if which == Shift.MORNING:
            return replace(self, morning=status)
        if which == Shift.EVENING:
            return replace(self, evening=status)
        if which == Shift.NIGHT:
            return replace(self, night=status)
        raise ValueError(f"Unknown shift: {which!r}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "guard_id": self.guard_id,
            "site_id": self.site_id,
            "date": self.date,
            "morning": self.morning.to_dict(),
            "evening": self.evening.to_dict(),
            "night": self.night.to_dict(),
            "overtime_hrs": self.overtime_hrs,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        return cls(
            id=str(data["id"]),
            guard_id=str(data["guard_id"]),
            site_id=str(data.get("site_id") or ""),
            date=str(data["date"]),
            morning=ShiftStatus.from_dict(data.get("morning") or {}),
            evening=ShiftStatus.from_dict(data.get("evening") or {}),
            night=ShiftStatus.from_dict(data.get("night") or {}),
            overtime_hrs=data.get("overtime_hrs") or 0,
        )


@dataclass(frozen=True)
class ShiftTally:
    """Per-guard monthly counts feeding the salary slip."""

    present_shifts: int = 0
    food_taken: int = 0

    def add(self, record: AttendanceRecord) -> "ShiftTally":
        present = self.present_shifts
        food = self.food_taken
        for status in record.shifts():
            if status.is_present:
                present += 1
                if status.food_taken:
                    food += 1
        return ShiftTally(present_shifts=present, food_taken=food)
