from __future__ import annotations

from typing import Dict

from ..common.datetime_utils import in_month
from .model import ShiftTally
from .repository import AttendanceRepository


class AttendanceAggregator:
    """Counts worked shifts and meals from stored attendance."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def tally(self, guard_id: str, month: str) -> ShiftTally:
        tally = ShiftTally()
        for record in self._attendance.get_all():
            if record.guard_id == guard_id and in_month(record.date, month):
                tally = tally.add(record)
        return tally

    def tally_by_guard(self, month: str) -> Dict[str, ShiftTally]:
        """Same counts as :meth:`tally` for every guard, in one pass."""
        out: Dict[str, ShiftTally] = {}
        for record in self._attendance.get_all():
            if in_month(record.date, month):
                out[record.guard_id] = out.get(record.guard_id, ShiftTally()).add(record)
        return out

    def present_on(self, date: str) -> int:
        """Present shifts across all guards for one day."""
        tally = ShiftTally()
        for record in self._attendance.get_all():
            if record.date == date:
                tally = tally.add(record)
        return tally.present_shifts
