from __future__ import annotations

from typing import List, Optional

from ..core.constants import ATTENDANCE_KEY
from ..database.record_store import RecordStore
from .model import AttendanceRecord


class StoreAttendanceRepository:
    def __init__(self, store: RecordStore):
        self._items = store.collection(ATTENDANCE_KEY, AttendanceRecord.from_dict)

    def get_all(self) -> List[AttendanceRecord]:
        return self._items.get_all()

    def get_by_date_and_site(self, date: str, site_id: str) -> List[AttendanceRecord]:
        return [r for r in self._items.get_all() if r.date == date and r.site_id == site_id]

    def get_for_guard_and_date(self, guard_id: str, date: str) -> Optional[AttendanceRecord]:
        for r in self._items.get_all():
            if r.guard_id == guard_id and r.date == date:
                return r
        return None

    def save_record(self, record: AttendanceRecord) -> bool:
        return self._items.upsert(record, key=lambda r: r.natural_key)
