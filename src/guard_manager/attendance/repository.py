from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_date_and_site(self, date: str, site_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_guard_and_date(self, guard_id: str, date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def save_record(self, record: AttendanceRecord) -> bool:
        """Create or replace the record for (guard_id, date).

        Returns True when an existing record was replaced.
        """

        raise NotImplementedError
