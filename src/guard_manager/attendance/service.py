from __future__ import annotations

from dataclasses import replace
from typing import List

from ..common.ids import new_id
from ..common.validators import require_iso_date, require_non_empty, require_non_negative
from ..core.constants import MAX_OVERTIME_HOURS
from ..core.enums import Shift, ShiftMark
from ..core.exceptions import NotFoundError, ValidationError
from ..guards.repository import GuardRepository
from .model import AttendanceRecord, ShiftStatus
from .repository import AttendanceRepository

_NEXT_MARK = {
    ShiftMark.UNMARKED: ShiftMark.PRESENT,
    ShiftMark.PRESENT: ShiftMark.ABSENT,
    ShiftMark.ABSENT: ShiftMark.UNMARKED,
}


class AttendanceService:
    """Use case: mark the daily attendance sheet for a site."""

    def __init__(self, attendance: AttendanceRepository, guards: GuardRepository):
        self._attendance = attendance
        self._guards = guards

    def list_all(self) -> List[AttendanceRecord]:
        return list(self._attendance.get_all())

    def get_by_date_and_site(self, date: str, site_id: str) -> List[AttendanceRecord]:
        date = require_iso_date(date, "Date")
        return list(self._attendance.get_by_date_and_site(date, site_id))

    def save_record(self, record: AttendanceRecord) -> AttendanceRecord:
        guard_id = require_non_empty(record.guard_id, "Guard")
        date = require_iso_date(record.date, "Date")
        overtime = require_non_negative(record.overtime_hrs, "Overtime hours")
        if overtime > MAX_OVERTIME_HOURS:
            raise ValidationError(f"Overtime hours must be between 0 and {MAX_OVERTIME_HOURS}")

        record_id = record.id
        if not record_id:
            existing = self._attendance.get_for_guard_and_date(guard_id, date)
            record_id = existing.id if existing else new_id()

        site_id = record.site_id
        if not site_id:
            guard = self._guards.get(guard_id)
            site_id = (guard.site_id or "") if guard else ""

        record = replace(record, id=record_id, guard_id=guard_id, site_id=site_id, date=date, overtime_hrs=overtime)
        self._attendance.save_record(record)
        return record

    def sheet_for(self, date: str, site_id: str) -> List[AttendanceRecord]:
        """One row per active guard at the site: the stored record or a blank one.

        Blank rows are not persisted until something is marked.
        """
        existing = {r.guard_id: r for r in self.get_by_date_and_site(date, site_id)}
        rows = []
        for guard in self._guards.get_all():
            if guard.site_id != site_id or not guard.is_active:
                continue
            rows.append(existing.get(guard.id) or self._blank(guard.id, site_id, date))
        return rows

    def cycle_shift(self, guard_id: str, date: str, which: Shift) -> AttendanceRecord:
        """Advance one shift Unmarked -> Present -> Absent -> Unmarked and save."""
        record = self._current(guard_id, date)
        status = record.shift(which)
        return self.save_record(record.with_shift(which, replace(status, mark=_NEXT_MARK[status.mark])))

    def toggle_food(self, guard_id: str, date: str, which: Shift) -> AttendanceRecord:
        record = self._current(guard_id, date)
        status = record.shift(which)
        if not status.is_present:
            return record
        return self.save_record(record.with_shift(which, ShiftStatus(mark=status.mark, food_taken=not status.food_taken)))

    def set_overtime(self, guard_id: str, date: str, hours) -> AttendanceRecord:
        record = self._current(guard_id, date)
        return self.save_record(replace(record, overtime_hrs=hours))

    def _current(self, guard_id: str, date: str) -> AttendanceRecord:
        date = require_iso_date(date, "Date")
        existing = self._attendance.get_for_guard_and_date(guard_id, date)
        if existing:
            return existing

        guard = self._guards.get(guard_id)
        if not guard:
            raise NotFoundError("Guard not found")
        return self._blank(guard.id, guard.site_id or "", date)

    @staticmethod
    def _blank(guard_id: str, site_id: str, date: str) -> AttendanceRecord:
        return AttendanceRecord(id="", guard_id=guard_id, site_id=site_id, date=date)
